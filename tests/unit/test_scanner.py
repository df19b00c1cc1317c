import os
import tempfile
import unittest
from pathlib import Path
from ruby_isort.scanner import find_source_files, normalize_extensions
from ruby_isort.sorter import NotFoundError

class TestScanner(unittest.TestCase):
    def test_finds_ruby_files_recursively(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            (root / "lib" / "nested").mkdir(parents=True)
            (root / "app.rb").touch()
            (root / "lib" / "a.rb").touch()
            (root / "lib" / "nested" / "b.RB").touch()
            (root / "README.md").touch()

            # Hidden files and folders are skipped
            (root / ".bundle").mkdir()
            (root / ".bundle" / "config.rb").touch()
            (root / ".hidden.rb").touch()

            files = find_source_files(root)
            rel = [f.relative_to(root).as_posix() for f in files]

            self.assertEqual(rel, ["app.rb", "lib/a.rb", "lib/nested/b.RB"])

    @unittest.skipIf(os.name == "nt", "symlinks need privileges on Windows")
    def test_skips_symlinks(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            (root / "real.rb").touch()
            os.symlink(root / "real.rb", root / "link.rb")

            files = find_source_files(root)

            self.assertEqual([f.name for f in files], ["real.rb"])

    def test_custom_extensions(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            (root / "Rakefile.rake").touch()
            (root / "app.rb").touch()

            files = find_source_files(root, {"rake"})

            self.assertEqual([f.name for f in files], ["Rakefile.rake"])

    def test_no_matching_files(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            (root / "file.txt").write_text("This is a text file.")
            self.assertEqual(find_source_files(root), [])

    def test_missing_root(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(NotFoundError):
                find_source_files(Path(tmpdir) / "nope")

    def test_normalize_extensions(self):
        self.assertEqual(normalize_extensions(["rb", ".RAKE", " gemspec ", ""]), {".rb", ".rake", ".gemspec"})

if __name__ == "__main__":
    unittest.main()
