"""BuildConfig construction and ignore-list normalisation."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path, PurePosixPath

from static_listing.config import BuildConfig, normalize_base_url, normalize_ignored
from static_listing.errors import BuildError


class NormalizeBaseUrlTests(unittest.TestCase):
    def test_adds_leading_and_trailing_slash(self) -> None:
        self.assertEqual(normalize_base_url(""), "/")
        self.assertEqual(normalize_base_url("/"), "/")
        self.assertEqual(normalize_base_url("docs"), "/docs/")
        self.assertEqual(normalize_base_url("/mirror/files/"), "/mirror/files/")


class NormalizeIgnoredTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_relative_entry_is_taken_from_input_root(self) -> None:
        self.assertEqual(normalize_ignored(self.root, "secret"), PurePosixPath("secret"))
        self.assertEqual(normalize_ignored(self.root, "./a/b/"), PurePosixPath("a/b"))

    def test_input_root_prefix_is_stripped(self) -> None:
        self.assertEqual(normalize_ignored(self.root, self.root / "secret"), PurePosixPath("secret"))

    def test_root_and_outside_entries_are_dropped(self) -> None:
        self.assertIsNone(normalize_ignored(self.root, "."))
        self.assertIsNone(normalize_ignored(self.root, "../elsewhere"))
        self.assertIsNone(normalize_ignored(self.root, self.root.parent / "elsewhere"))

    def test_input_argument_prefix_is_stripped(self) -> None:
        previous = Path.cwd()
        try:
            os.chdir(self.root.parent)
            entry = os.path.join(self.root.name, "secret")
            self.assertEqual(
                normalize_ignored(self.root, entry, input_arg=self.root.name),
                PurePosixPath("secret"),
            )
        finally:
            os.chdir(previous)

    def test_relative_entry_ignores_working_directory_inside_input(self) -> None:
        sub = self.root / "sub"
        sub.mkdir()
        previous = Path.cwd()
        try:
            os.chdir(sub)
            config = BuildConfig.create("..", self.root.parent / "out", ignored=["secret", "../private"])
        finally:
            os.chdir(previous)

        self.assertEqual(config.input_dir, self.root)
        self.assertIn(PurePosixPath("secret"), config.ignored)
        self.assertIn(PurePosixPath("private"), config.ignored)
        self.assertNotIn(PurePosixPath("sub/secret"), config.ignored)


class BuildConfigTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_vcs_dir_and_nested_output_are_always_ignored(self) -> None:
        config = BuildConfig.create(self.root, self.root / "public", ignored=["secret"])
        self.assertTrue(config.is_ignored(PurePosixPath(".git")))
        self.assertTrue(config.is_ignored(PurePosixPath("public")))
        self.assertTrue(config.is_ignored(PurePosixPath("secret")))
        self.assertFalse(config.is_ignored(PurePosixPath("secret/inner")))

    def test_deeply_nested_output_is_ignored(self) -> None:
        config = BuildConfig.create(self.root, self.root / "build" / "site")
        self.assertTrue(config.is_ignored(PurePosixPath("build/site")))
        self.assertFalse(config.is_ignored(PurePosixPath("build")))

    def test_output_outside_input_adds_nothing(self) -> None:
        config = BuildConfig.create(self.root / "src", self.root / "out")
        self.assertEqual(config.ignored, frozenset({PurePosixPath(".git")}))

    def test_hidden_filter_follows_flag(self) -> None:
        self.assertTrue(BuildConfig.create(self.root, self.root / "o").is_hidden(".env"))
        self.assertFalse(
            BuildConfig.create(self.root, self.root / "o", include_hidden=True).is_hidden(".env")
        )

    def test_validate_rejects_output_equal_to_input(self) -> None:
        config = BuildConfig.create(self.root, self.root)
        with self.assertRaises(BuildError):
            config.validate()

    def test_validate_rejects_input_inside_output(self) -> None:
        config = BuildConfig.create(self.root / "site" / "src", self.root / "site")
        with self.assertRaises(BuildError) as ctx:
            config.validate()
        self.assertIn("inside the output directory", str(ctx.exception))

    def test_output_path_for_reroots_node(self) -> None:
        config = BuildConfig.create(self.root / "src", self.root / "out")
        self.assertEqual(
            config.output_path_for(self.root / "src" / "a" / "b.txt"),
            self.root / "out" / "a" / "b.txt",
        )


if __name__ == "__main__":
    unittest.main()
