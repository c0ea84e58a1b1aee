"""Tests for separating redirect targets from the command tokens."""

import pytest

from tinysh.errors import SplitError
from tinysh.redirect import OPERATORS, RedirectOperator, Split, split_redirects


class TestSplitRedirects:
    def test_no_redirections(self):
        """A plain command keeps every token in cmd_args."""
        assert split_redirects(["echo", "hello"]) == Split(cmd_args=["echo", "hello"])

    def test_mixed_operators(self):
        split = split_redirects(
            ["echo", "hi", ">", "/tmp/a", ">>", "/tmp/b", "2>", "/tmp/c"]
        )
        assert split.cmd_args == ["echo", "hi"]
        assert split.outs == ["/tmp/a"]
        assert split.append_outs == ["/tmp/b"]
        assert split.errs == ["/tmp/c"]
        assert split.append_errs == []

    @pytest.mark.parametrize(
        "op, field",
        [
            (">", "outs"),
            ("1>", "outs"),
            (">>", "append_outs"),
            ("1>>", "append_outs"),
            ("2>", "errs"),
            ("2>>", "append_errs"),
        ],
    )
    def test_each_spelling(self, op, field):
        split = split_redirects(["ls", op, "f"])
        assert split.cmd_args == ["ls"]
        assert getattr(split, field) == ["f"]
        assert split.has_redirects()

    def test_multiple_targets_keep_order(self):
        split = split_redirects(["ls", ">", "a", "x", "1>", "b", "2>>", "e"])
        assert split.cmd_args == ["ls", "x"]
        assert split.outs == ["a", "b"]
        assert split.append_errs == ["e"]

    def test_every_token_lands_somewhere(self):
        tokens = ["cat", "f", "2>", "e1", ">>", "o1", "g", "2>>", "e2", ">", "o2"]
        split = split_redirects(tokens)
        operators = [t for t in tokens if t in OPERATORS]
        placed = (
            split.cmd_args + split.outs + split.append_outs + split.errs + split.append_errs
        )
        assert sorted(placed + operators) == sorted(tokens)

    def test_operator_back_to_back_is_an_error(self):
        with pytest.raises(SplitError, match="parse error near `>>`"):
            split_redirects([">", ">>", "/tmp/a"])

    def test_trailing_operator_is_dropped(self):
        split = split_redirects(["echo", "hi", ">"])
        assert split == Split(cmd_args=["echo", "hi"])
        assert not split.has_redirects()

    def test_other_operators_are_plain_arguments(self):
        split = split_redirects(["echo", "|", "&", "<", "3>", "x"])
        assert split.cmd_args == ["echo", "|", "&", "<", "3>", "x"]

    def test_targets_accessor(self):
        split = split_redirects(["a", "2>", "e"])
        assert split.targets(RedirectOperator.STDERR_TRUNCATE) == ["e"]
