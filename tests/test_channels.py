"""Tests for logchannel.channels — channel list parsing and normalization."""

import pytest

from logchannel.channels import (
    DEFAULT_CHANNELS,
    ENV_VAR,
    channels_from_env,
    normalize_channels,
    parse_channel_list,
)


class TestNormalizeChannels:
    """Test set_channel() input normalization."""

    def test_single_name(self):
        """A single string becomes a one-element tuple."""
        assert normalize_channels("api") == ("api",)

    def test_single_name_trimmed(self):
        """A single string is trimmed."""
        assert normalize_channels("  api\t") == ("api",)

    def test_blank_string_is_empty(self):
        """A blank string means no active channels."""
        assert normalize_channels("") == ()
        assert normalize_channels("   ") == ()

    def test_list_trimmed_and_filtered(self):
        """Whitespace-only elements are dropped, the rest trimmed."""
        assert normalize_channels(["  ", "\t", " ok "]) == ("ok",)

    def test_order_preserved(self):
        """Caller order is kept, not sorted."""
        assert normalize_channels(["z", "a", "m"]) == ("z", "a", "m")

    def test_duplicates_kept(self):
        """Duplicates are not removed."""
        assert normalize_channels(["a", "a"]) == ("a", "a")

    def test_empty_list(self):
        """An empty list gives no active channels (no default fallback)."""
        assert normalize_channels([]) == ()

    def test_generator_accepted(self):
        """Any iterable of names is accepted."""
        assert normalize_channels(n for n in ["x", " y "]) == ("x", "y")


class TestParseChannelList:
    """Test comma-separated parsing used for LOG_CHANNELS."""

    def test_trimmed_in_order(self):
        """'a, b ,c' parses to a, b, c."""
        assert parse_channel_list("a, b ,c") == ("a", "b", "c")

    @pytest.mark.parametrize("value", [None, "", "   ", " , ", ",,,"])
    def test_degenerate_values_fall_back(self, value):
        """Unset, blank, or all-empty values give the default channel."""
        assert parse_channel_list(value) == DEFAULT_CHANNELS

    def test_empty_pieces_dropped(self):
        """Empty pieces between commas are skipped."""
        assert parse_channel_list("a,,b,") == ("a", "b")

    def test_duplicates_kept(self):
        """Repeated names survive parsing."""
        assert parse_channel_list("a,a") == ("a", "a")

    def test_default_is_default(self):
        """The fallback list is exactly ['default']."""
        assert list(DEFAULT_CHANNELS) == ["default"]


class TestChannelsFromEnv:
    """Test reading LOG_CHANNELS."""

    def test_unset(self):
        """No variable gives the default."""
        assert channels_from_env({}) == ("default",)

    def test_set(self):
        """Variable value is parsed."""
        assert channels_from_env({ENV_VAR: "api,worker"}) == ("api", "worker")

    def test_reads_os_environ_by_default(self, monkeypatch):
        """Without a mapping, os.environ is read."""
        monkeypatch.setenv(ENV_VAR, "x, y")
        assert channels_from_env() == ("x", "y")

    def test_read_failure_falls_back(self):
        """An environment that raises on access gives the default."""
        class BrokenEnv:
            def get(self, key, default=None):
                raise PermissionError("no env access")

        assert channels_from_env(BrokenEnv()) == ("default",)
