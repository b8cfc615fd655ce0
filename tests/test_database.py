"""Tests for the JSON compilation database facade.

Covers the load pipeline end to end (buffer/file -> records -> index) and
the three query operations.
"""

import json

import pytest

from ccdb.database import (
    CompileCommand,
    DatabaseIOError,
    DatabaseNotFoundError,
    EscapeSyntaxError,
    JSONCompilationDatabase,
    LoadError,
    StructuralError,
    StructuralErrorKind,
    load_from_bytes,
    load_from_file,
)


def load(entries):
    return JSONCompilationDatabase.load_from_buffer(json.dumps(entries).encode("utf-8"))


class TestLoad:
    """Loading is all-or-nothing."""

    def test_single_entry(self):
        db = load_from_bytes(b'[{"directory":"/d","file":"/d/a.c","arguments":["cc","a.c"]}]')
        assert db.get_compile_commands("/d/a.c") == [
            CompileCommand(directory="/d", filename="/d/a.c", arguments=("cc", "a.c"))
        ]

    def test_str_buffer_accepted(self):
        db = JSONCompilationDatabase.load_from_buffer('[{"directory":"/d","file":"a.c","command":"cc a.c"}]')
        assert len(db) == 1

    def test_missing_file_fails_whole_load(self):
        entries = [
            {"directory": "/d", "file": "a.c", "arguments": ["cc"]},
            {"directory": "/d", "arguments": ["cc"]},
        ]
        with pytest.raises(StructuralError) as exc_info:
            load(entries)
        assert exc_info.value.kind is StructuralErrorKind.MISSING_FILE

    def test_unknown_key_in_last_entry_fails_whole_load(self):
        entries = [{"directory": "/d", "file": f"{i}.c", "arguments": ["cc"]} for i in range(3)]
        entries[-1]["flags"] = "-O2"
        with pytest.raises(StructuralError) as exc_info:
            load(entries)
        assert exc_info.value.kind is StructuralErrorKind.UNKNOWN_KEY

    def test_malformed_command_fails_whole_load(self):
        with pytest.raises(EscapeSyntaxError):
            load([{"directory": "/d", "file": "a.c", "command": "cc 'a.c"}])

    def test_all_load_errors_share_base(self):
        for bad in ([{"directory": "/d"}], [{"directory": "/d", "file": "a", "command": '"'}]):
            with pytest.raises(LoadError):
                load(bad)

    def test_deeply_nested_document_is_a_load_error(self):
        with pytest.raises(LoadError):
            JSONCompilationDatabase.load_from_buffer("[" * 5000 + "]" * 5000)

    def test_empty_database(self):
        db = load([])
        assert len(db) == 0
        assert db.get_all_files() == []
        assert db.get_all_compile_commands() == []


class TestLoadFromFile:
    """File reading wraps I/O failures as DatabaseIOError."""

    def test_load_from_file(self, write_database, sample_entries):
        path = write_database(sample_entries)
        db = load_from_file(path)
        assert db.source == str(path)
        assert len(db) == 4

    def test_missing_file(self, tmp_path):
        with pytest.raises(DatabaseIOError) as exc_info:
            JSONCompilationDatabase.load_from_file(tmp_path / "nope.json")
        assert str(exc_info.value).startswith("Error while opening JSON database: ")
        assert exc_info.value.path == str(tmp_path / "nope.json")

    def test_missing_file_is_not_found(self, tmp_path):
        with pytest.raises(DatabaseNotFoundError):
            JSONCompilationDatabase.load_from_file(tmp_path / "nope.json")

    def test_directory_instead_of_file(self, tmp_path):
        with pytest.raises(DatabaseIOError) as exc_info:
            JSONCompilationDatabase.load_from_file(tmp_path)
        assert not isinstance(exc_info.value, DatabaseNotFoundError)

    def test_broken_file_is_structural_not_io(self, write_database):
        path = write_database(raw='{"not": "an array"}')
        with pytest.raises(StructuralError):
            JSONCompilationDatabase.load_from_file(path)


class TestGetCompileCommands:
    """Single-file lookup."""

    def test_relative_file_matches_absolute_query(self):
        db = load([{"directory": "/d", "file": "a.c", "arguments": ["cc", "a.c"]}])
        commands = db.get_compile_commands("/d/a.c")
        assert len(commands) == 1
        assert commands[0].directory == "/d"
        assert commands[0].arguments == ("cc", "a.c")
        assert commands[0].filename == "a.c"

    def test_same_file_twice_returned_in_document_order(self):
        db = load([
            {"directory": "/d", "file": "a.c", "arguments": ["cc", "-O0", "a.c"]},
            {"directory": "/d", "file": "/d/b.c", "arguments": ["cc", "b.c"]},
            {"directory": "/d", "file": "/d/./a.c", "arguments": ["cc", "-O2", "a.c"]},
        ])
        commands = db.get_compile_commands("/d/a.c")
        assert [c.arguments[1] for c in commands] == ["-O0", "-O2"]

    def test_never_present_path_is_empty(self):
        db = load([{"directory": "/d", "file": "a.c", "arguments": ["cc"]}])
        assert db.get_compile_commands("/d/zzz.c") == []
        assert db.get_compile_commands("") == []

    def test_ambiguous_bare_name_is_empty(self):
        db = load([
            {"directory": "/a", "file": "x.c", "arguments": ["cc"]},
            {"directory": "/b", "file": "x.c", "arguments": ["cc"]},
        ])
        assert db.get_compile_commands("x.c") == []
        assert len(db.get_compile_commands("a/x.c")) == 1

    def test_query_in_other_separator_style(self):
        db = load([{"directory": "C:\\proj", "file": "src\\a.c", "arguments": ["cl", "src\\a.c"]}])
        commands = db.get_compile_commands("C:/proj/src/a.c")
        assert commands[0].arguments == ("cl", "src\\a.c")
        assert commands[0].directory == "C:\\proj"

    def test_sample_database(self, sample_entries):
        db = load(sample_entries)
        main = db.get_compile_commands("src/main.c")
        assert main[0].arguments == (
            "cc", "-c", '-DGREETING="hello world"', "-I../include", "../src/main.c",
        )
        util = db.get_compile_commands("/work/src/util.c")
        assert [c.directory for c in util] == ["/work/build", "/work/build/debug"]
        assert len(db.get_compile_commands("/work/build/../tests/test_main.c")) == 1


class TestEnumeration:
    """All-files and all-commands enumeration."""

    def test_all_files_distinct(self, sample_entries):
        db = load(sample_entries)
        assert sorted(db.get_all_files()) == [
            "/work/build/../src/main.c",
            "/work/build/../tests/test_main.c",
            "/work/src/util.c",
        ]

    def test_all_commands_grouped_by_file(self):
        db = load([
            {"directory": "/d", "file": "a.c", "arguments": ["cc", "1"]},
            {"directory": "/d", "file": "b.c", "arguments": ["cc", "2"]},
            {"directory": "/d", "file": "a.c", "arguments": ["cc", "3"]},
        ])
        commands = db.get_all_compile_commands()
        assert len(commands) == 3
        by_file = {}
        for command in commands:
            by_file.setdefault(command.filename, []).append(command.arguments[1])
        assert by_file == {"a.c": ["1", "3"], "b.c": ["2"]}
        # Records of one file are contiguous
        files_in_order = [c.filename for c in commands]
        assert files_in_order in (["a.c", "a.c", "b.c"], ["b.c", "a.c", "a.c"])

    def test_to_dict_round_trips_as_arguments_entry(self):
        db = load([{"directory": "/d", "file": "a.c", "command": 'cc "a b.c"'}])
        assert db.get_all_compile_commands()[0].to_dict() == {
            "directory": "/d",
            "file": "a.c",
            "arguments": ["cc", "a b.c"],
        }
