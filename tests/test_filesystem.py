import sys

import pytest

from enumconf.filesystem import FileSystem, MemoryFileSystem, OSFileSystem


class TestOSFileSystem:
    def test_file_and_dir(self, tmp_path) -> None:
        (tmp_path / "f").write_text("x")
        fs = OSFileSystem()
        assert fs.stat(str(tmp_path / "f")).is_dir is False
        assert fs.stat(str(tmp_path)).is_dir is True

    def test_missing_raises(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            OSFileSystem().stat(str(tmp_path / "nope"))

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX path layout")
    def test_rerooted(self, tmp_path) -> None:
        conf = tmp_path / "etc" / "app"
        conf.mkdir(parents=True)
        (conf / "app.conf").write_text("x")
        fs = OSFileSystem(root=tmp_path)
        info = fs.stat("/etc/app/app.conf")
        assert info.path == "/etc/app/app.conf"
        assert info.is_dir is False
        assert fs.stat("/etc").is_dir is True

    def test_satisfies_protocol(self) -> None:
        assert isinstance(OSFileSystem(), FileSystem)
        assert isinstance(MemoryFileSystem(), FileSystem)


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX path layout")
class TestMemoryFileSystem:
    def test_parents_implied(self) -> None:
        fs = MemoryFileSystem(files=["/a/b/c.conf"])
        assert fs.stat("/a/b").is_dir
        assert fs.stat("/a").is_dir
        assert fs.stat("/").is_dir
        assert not fs.stat("/a/b/c.conf").is_dir

    def test_add_file(self) -> None:
        fs = MemoryFileSystem().add_file("/x/y.conf")
        assert not fs.stat("/x/y.conf").is_dir
        assert fs.stat("/x").is_dir

    def test_missing(self) -> None:
        with pytest.raises(FileNotFoundError):
            MemoryFileSystem().stat("/nope")

    def test_injected_error(self) -> None:
        fs = MemoryFileSystem(files=["/f"], errors={"/f": PermissionError("denied")})
        with pytest.raises(PermissionError):
            fs.stat("/f")
