"""Tests for handle construction, identity and the shared mutating verbs."""

from __future__ import annotations

import os
import tempfile
import time
import unittest
from pathlib import Path
from unittest import mock

from lazyfiles import (
    DeleteFailedError,
    EmptyPathError,
    File,
    Folder,
    InvalidPathError,
    Kind,
    MoveFailedError,
    RenameFailedError,
)


class HandleConstructionTests(unittest.TestCase):
    def test_file_handle_for_plain_file_and_folder_handle_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            target = root / "a.txt"
            target.write_text("a\n", encoding="utf-8")

            file = File(target)
            self.assertIs(file.kind, Kind.FILE)
            self.assertEqual(file.location, target)
            self.assertEqual(file.name, "a.txt")
            with self.assertRaises(InvalidPathError) as ctx:
                Folder(target)
            self.assertEqual(ctx.exception.location, target)

    def test_folder_path_rejected_as_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            with self.assertRaises(InvalidPathError):
                File(root)
            self.assertIs(Folder(root).kind, Kind.FOLDER)

    def test_missing_path_is_invalid(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(InvalidPathError):
                File(Path(tmp) / "missing.txt")

    def test_empty_and_directory_paths_give_empty_path_for_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(EmptyPathError):
                File("")
            with self.assertRaises(EmptyPathError):
                File(tmp + os.sep)
            with self.assertRaises(EmptyPathError):
                Folder("")

    def test_relative_paths_resolve_against_current_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "sub").mkdir()
            (root / "sub" / "b.txt").write_text("b\n", encoding="utf-8")
            previous = os.getcwd()
            os.chdir(root)
            try:
                file = File("sub/../sub/b.txt")
                named = File.named("sub/b.txt")
                current = Folder()
            finally:
                os.chdir(previous)

            self.assertEqual(file.location, root / "sub" / "b.txt")
            self.assertEqual(named, file)
            self.assertEqual(current.location, root)

    def test_extension_helpers(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "report.final.csv").write_text("", encoding="utf-8")
            (root / ".env").write_text("", encoding="utf-8")

            report = File(root / "report.final.csv")
            self.assertEqual(report.extension, "csv")
            self.assertEqual(report.name_excluding_extension, "report.final")
            dotfile = File(root / ".env")
            self.assertIsNone(dotfile.extension)
            self.assertEqual(dotfile.name_excluding_extension, ".env")

    def test_equality_uses_kind_and_location(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a.txt").write_text("a\n", encoding="utf-8")

            self.assertEqual(File(root / "a.txt"), File(str(root) + "/./a.txt"))
            self.assertNotEqual(Folder(root), File(root / "a.txt"))
            self.assertNotEqual(File(root / "a.txt"), str(root / "a.txt"))
            with self.assertRaises(TypeError):
                hash(Folder(root))

    def test_repr_names_kind_and_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            self.assertEqual(repr(Folder(root)), f"Folder(name: {root.name}, path: {root})")

    def test_handle_is_path_like(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a.txt").write_text("content", encoding="utf-8")
            with open(File(root / "a.txt"), encoding="utf-8") as handle:
                self.assertEqual(handle.read(), "content")


class HandleIdentityTests(unittest.TestCase):
    def test_parent_is_recomputed_and_none_at_root(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a.txt").write_text("a\n", encoding="utf-8")
            file = File(root / "a.txt")

            self.assertEqual(file.parent, Folder(root))
            self.assertIsNone(Folder("/").parent)
            self.assertEqual(Folder("/").name, "/")

    def test_modification_date_is_fetched_once(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            target = root / "a.txt"
            target.write_text("a\n", encoding="utf-8")
            file = File(target)

            first = file.modification_date
            later = time.time() + 3600
            os.utime(target, (later, later))
            self.assertEqual(file.modification_date, first)
            self.assertNotEqual(File(target).modification_date, first)


class RenameTests(unittest.TestCase):
    def test_rename_keeps_extension_by_default(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "draft.md").write_text("x\n", encoding="utf-8")
            file = File(root / "draft.md")

            file.rename("final")

            self.assertEqual(file.name, "final.md")
            self.assertEqual(file.location, root / "final.md")
            self.assertTrue((root / "final.md").is_file())
            self.assertFalse((root / "draft.md").exists())

    def test_rename_does_not_duplicate_existing_extension(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "draft.md").write_text("x\n", encoding="utf-8")
            file = File(root / "draft.md")

            file.rename("final.md")
            self.assertEqual(file.name, "final.md")

            file.rename("plain", keep_extension=False)
            self.assertEqual(file.name, "plain")
            self.assertIsNone(file.extension)
            self.assertTrue((root / "plain").is_file())

    def test_rename_folder(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "old" / "inner").mkdir(parents=True)
            folder = Folder(root / "old")

            folder.rename("new")

            self.assertEqual(folder.location, root / "new")
            self.assertTrue((root / "new" / "inner").is_dir())

    def test_rename_to_same_name_is_a_no_op(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "same.txt").write_text("x\n", encoding="utf-8")
            file = File(root / "same.txt")

            file.rename("same")

            self.assertEqual(file.location, root / "same.txt")
            self.assertTrue((root / "same.txt").is_file())

    def test_failed_rename_leaves_handle_untouched(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a.txt").write_text("a\n", encoding="utf-8")
            (root / "b.txt").write_text("b\n", encoding="utf-8")
            file = File(root / "a.txt")

            with self.assertRaises(RenameFailedError) as ctx:
                file.rename("b")

            self.assertIs(ctx.exception.entity, file)
            self.assertIsInstance(ctx.exception.__cause__, FileExistsError)
            self.assertEqual(file.name, "a.txt")
            self.assertEqual(file.location, root / "a.txt")
            self.assertEqual((root / "b.txt").read_text(encoding="utf-8"), "b\n")

    def test_rename_rejects_names_that_are_not_a_single_component(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "sub").mkdir()
            (root / "a.txt").write_text("a\n", encoding="utf-8")
            file = File(root / "a.txt")

            for new_name in ("sub/b", "", ".", ".."):
                with self.subTest(new_name=new_name):
                    with self.assertRaises(RenameFailedError):
                        file.rename(new_name, keep_extension=False)
                    self.assertEqual(file.name, "a.txt")
                    self.assertEqual(file.location, root / "a.txt")

            self.assertEqual(sorted(p.name for p in (root / "sub").iterdir()), [])
            self.assertTrue((root / "a.txt").is_file())

    def test_name_matches_location_after_rename(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a.txt").write_text("a\n", encoding="utf-8")
            file = File(root / "a.txt")

            file.rename("b")

            self.assertEqual(file.name, file.location.name)
            self.assertEqual(file.name, "b.txt")

    def test_root_cannot_be_renamed(self) -> None:
        root = Folder("/")
        with mock.patch.object(root.driver, "move") as move:
            with self.assertRaises(RenameFailedError):
                root.rename("elsewhere")
        move.assert_not_called()


class MoveAndDeleteTests(unittest.TestCase):
    def test_move_into_folder_updates_location_and_parent(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a.txt").write_text("a\n", encoding="utf-8")
            (root / "dest").mkdir()
            file = File(root / "a.txt")
            dest = Folder(root / "dest")

            file.move(dest)

            self.assertEqual(file.name, "a.txt")
            self.assertEqual(file.location, root / "dest" / "a.txt")
            self.assertEqual(file.parent, dest)
            self.assertFalse((root / "a.txt").exists())

    def test_move_onto_existing_entry_fails_without_mutation(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "dest").mkdir()
            (root / "a.txt").write_text("mine\n", encoding="utf-8")
            (root / "dest" / "a.txt").write_text("theirs\n", encoding="utf-8")
            file = File(root / "a.txt")

            with self.assertRaises(MoveFailedError):
                file.move(Folder(root / "dest"))

            self.assertEqual(file.location, root / "a.txt")
            self.assertEqual((root / "dest" / "a.txt").read_text(encoding="utf-8"), "theirs\n")

    def test_delete_folder_removes_descendants(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            nested = root / "tree" / "deep" / "deeper"
            nested.mkdir(parents=True)
            (nested / "leaf.txt").write_text("x\n", encoding="utf-8")
            (root / "tree" / "top.txt").write_text("x\n", encoding="utf-8")

            Folder(root / "tree").delete()

            for former in (root / "tree", root / "tree" / "top.txt", nested, nested / "leaf.txt"):
                self.assertFalse(former.exists())

    def test_deleted_handle_dangles_and_later_operations_fail(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a.txt").write_text("a\n", encoding="utf-8")
            (root / "dest").mkdir()
            file = File(root / "a.txt")

            file.delete()

            self.assertEqual(file.location, root / "a.txt")
            with self.assertRaises(DeleteFailedError) as ctx:
                file.delete()
            self.assertIsInstance(ctx.exception.__cause__, FileNotFoundError)
            with self.assertRaises(MoveFailedError):
                file.move(Folder(root / "dest"))
            with self.assertRaises(RenameFailedError):
                file.rename("b")
            with self.assertRaises(RenameFailedError):
                file.rename("a")
            self.assertFalse((root / "dest" / "a.txt").exists())


if __name__ == "__main__":
    unittest.main()
