from cacheprobe.adapters.storage_fs import FileSystemReader

def test_reads_text_file(tmp_path):
    size_file = tmp_path / "size"
    size_file.write_text("32K\n")

    result = FileSystemReader().read(str(size_file))

    assert result.ok
    assert result.text == "32K\n"

def test_missing_file_is_failure(tmp_path):
    result = FileSystemReader().read(str(tmp_path / "index0" / "level"))
    assert not result.ok
    assert result.text == ""
    assert "level" in result.error

def test_directory_is_failure(tmp_path):
    assert not FileSystemReader().read(str(tmp_path)).ok

def test_invalid_utf8_is_replaced(tmp_path):
    cpuinfo = tmp_path / "cpuinfo"
    cpuinfo.write_bytes(b"model name\t: Caf\xe9 CPU\n")

    result = FileSystemReader().read(str(cpuinfo))

    assert result.ok
    assert result.text == "model name\t: Caf� CPU\n"
