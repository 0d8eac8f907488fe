from cacheprobe.cli.main import app

app(prog_name="cacheprobe")
