"""Tests for the command table and its handlers."""

import re

import pytest

from portfolio_term.ansi import strip_ansi
from portfolio_term.commands import (
    COMMAND_NAMES,
    COMMAND_TABLE,
    COMMANDS,
    LOADING,
    echo,
    format_date,
    show_about,
    show_articles,
    show_banner,
    show_contact,
    show_ctf,
    show_help,
    show_projects,
    show_skills,
    skill_rows,
)
from portfolio_term.types import ContentSnapshot


def make_snapshot(**overrides):
    data = {
        "about": "I break things to make them safer.",
        "skills": ["a", "b", "c", "d", "e", "f", "g"],
        "projects": [
            {"title": "Alpha", "description": "x" * 100, "link": "https://a.example"},
            {"title": "Beta", "description": "Short one."},
            {"title": "Gamma", "description": "Third."},
        ],
        "ctf": [
            {"date": "2024-05", "event": "PicoCTF", "rank": "12th", "description": "Web and crypto."},
        ],
        "articles": [
            {"title": f"Post {i}", "date": "2024-01-0%d" % i, "readTime": "5 min",
             "link": f"https://blog.example/{i}"}
            for i in range(1, 8)
        ],
        "contact": {"email": "me@example.com", "github": "gh/me"},
    }
    data.update(overrides)
    return ContentSnapshot.from_dict(data)


def plain(lines):
    return [strip_ansi(line) for line in lines]


class TestCommandTable:
    def test_fourteen_commands_in_declared_order(self):
        assert COMMAND_NAMES == (
            "help", "about", "skills", "projects", "ctf", "articles", "contact",
            "clear", "banner", "ls", "pwd", "whoami", "date", "echo",
        )

    def test_table_keys_match_names(self):
        assert set(COMMAND_TABLE) == set(COMMAND_NAMES)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            COMMAND_TABLE["rm"] = COMMANDS[0]

    def test_only_clear_clears(self):
        assert [c.name for c in COMMANDS if c.clears] == ["clear"]


class TestHelp:
    def test_header_then_blank(self):
        lines = plain(show_help([], None))
        assert lines[0] == "Available Commands:"
        assert lines[1] == ""

    def test_one_line_per_command(self):
        lines = plain(show_help([], None))[2:]
        assert len(lines) == 14
        for line, cmd in zip(lines, COMMANDS):
            assert line.startswith("  " + cmd.usage)
            assert line.endswith(cmd.description)

    def test_argument_hints(self):
        text = "\n".join(plain(show_help([], None)))
        assert "echo [text]" in text
        assert "projects [number]" in text

    def test_usage_column_padded(self):
        lines = plain(show_help([], None))
        assert lines[2] == "  " + "help".ljust(20) + " Display this help message"

    def test_works_without_content(self):
        assert show_help([], None) == show_help([], make_snapshot())


class TestLoadingPlaceholder:
    def test_data_commands_before_load(self):
        for handler in (show_about, show_skills, show_projects, show_ctf,
                        show_articles, show_contact):
            assert handler([], None) == [LOADING]

    def test_missing_field_counts_as_not_loaded(self):
        snapshot = ContentSnapshot.from_dict({"about": "hi"})
        assert show_skills([], snapshot) == ["Loading data..."]
        assert show_contact([], snapshot) == ["Loading data..."]
        assert plain(show_about([], snapshot))[-1] == "hi"


class TestAbout:
    def test_about_verbatim(self):
        lines = plain(show_about([], make_snapshot()))
        assert lines == ["[+] About Me:", "", "I break things to make them safer."]


class TestSkills:
    def test_rows_for_seven_skills(self):
        assert skill_rows(list("abcdefg")) == [[0, 3, 6], [1, 4], [2, 5]]

    def test_rows_exact_fit(self):
        assert skill_rows(list("abcdef")) == [[0, 2, 4], [1, 3, 5]]

    def test_rows_fewer_than_columns(self):
        assert skill_rows(["only"]) == [[0]]

    def test_rows_empty(self):
        assert skill_rows([]) == []

    def test_layout_lines(self):
        lines = show_skills([], make_snapshot())
        assert lines[0].endswith("[+] Technical Skills:\x1b[0m")
        assert lines[1] == ""
        assert lines[2] == "  • a".ljust(30) + "  • d".ljust(30) + "  • g".ljust(30)
        assert lines[3] == "  • b".ljust(30) + "  • e".ljust(30)
        assert lines[4] == "  • c".ljust(30) + "  • f".ljust(30)
        assert len(lines) == 5


class TestProjects:
    def test_list_all(self):
        lines = plain(show_projects([], make_snapshot()))
        assert lines[0] == "[+] Projects:"
        assert lines[2] == "  1. Alpha"
        assert lines[3] == "     " + "x" * 80 + "..."
        assert lines[4] == ""
        assert lines[5] == "  2. Beta"
        assert lines[6] == "     Short one...."
        assert lines[-1] == 'Tip: Use "projects [number]" for detailed view'

    def test_non_numeric_argument_lists_all(self):
        snapshot = make_snapshot()
        assert show_projects(["abc"], snapshot) == show_projects([], snapshot)

    def test_empty_argument_lists_all(self):
        snapshot = make_snapshot()
        assert show_projects([""], snapshot) == show_projects([], snapshot)

    def test_detail(self):
        lines = plain(show_projects(["1"], make_snapshot()))
        assert lines == [
            "[+] Project 1: Alpha",
            "",
            "Description: " + "x" * 100,
            "Link: https://a.example",
        ]

    def test_detail_without_link(self):
        lines = plain(show_projects(["2"], make_snapshot()))
        assert lines[-1] == "Description: Short one."
        assert not any(line.startswith("Link:") for line in lines)

    def test_out_of_range(self):
        assert show_projects(["99"], make_snapshot()) == [
            "Project 99 not found. Available: 1-3"
        ]

    def test_zero_is_out_of_range(self):
        assert show_projects(["0"], make_snapshot()) == [
            "Project 0 not found. Available: 1-3"
        ]

    def test_negative_is_out_of_range(self):
        assert show_projects(["-2"], make_snapshot()) == [
            "Project -2 not found. Available: 1-3"
        ]

    @pytest.mark.parametrize("arg", ["1_0", "٣", "1.5", "2 ", "0x2"])
    def test_only_ascii_integers_select(self, arg):
        snapshot = make_snapshot()
        assert show_projects([arg], snapshot) == show_projects([], snapshot)

    def test_explicit_plus_sign(self):
        snapshot = make_snapshot()
        assert show_projects(["+2"], snapshot) == show_projects(["2"], snapshot)

    def test_leading_zeros(self):
        lines = plain(show_projects(["03"], make_snapshot()))
        assert lines[0] == "[+] Project 3: Gamma"


class TestCtf:
    def test_entry_block(self):
        lines = plain(show_ctf([], make_snapshot()))
        assert lines == [
            "[+] CTF Achievements:",
            "",
            "  [2024-05] PicoCTF",
            "  Rank: 12th",
            "  Web and crypto.",
            "",
        ]


class TestArticles:
    def test_at_most_five(self):
        lines = plain(show_articles([], make_snapshot()))
        titles = [line for line in lines if re.match(r"^  \d\. ", line)]
        assert titles == [f"  {i}. Post {i}" for i in range(1, 6)]

    def test_entry_format(self):
        lines = plain(show_articles([], make_snapshot()))
        assert lines[2:6] == [
            "  1. Post 1",
            "     2024-01-01 • 5 min",
            "     https://blog.example/1",
            "",
        ]


class TestContact:
    def test_keys_uppercased(self):
        lines = plain(show_contact([], make_snapshot()))
        assert lines[2:] == ["  EMAIL: me@example.com", "  GITHUB: gh/me"]


class TestStaticCommands:
    def test_echo_joins_args(self):
        assert echo(["a", "b", "c"], None) == ["a b c"]

    def test_echo_no_args(self):
        assert echo([], None) == [""]

    def test_banner_has_caption(self):
        lines = plain(show_banner([], None))
        assert len(lines) > 2
        assert "CYBERSECURITY PORTFOLIO - INTERACTIVE TERMINAL" in lines[-1]

    def test_date_format(self):
        assert re.match(r"^\w{3} \w{3} \d{2} \d{4} \d{2}:\d{2}:\d{2} GMT", format_date(0))

    def test_cosmetic_commands(self):
        assert COMMAND_TABLE["whoami"].handler([], None) == ["root"]
        assert COMMAND_TABLE["pwd"].handler([], None) == ["/home/portfolio"]
        assert "projects.html" in COMMAND_TABLE["ls"].handler([], None)[0]
