"""Tests for HLS playlist rewriting."""

import pytest

from vodgate.domain.playlist import PlaylistRewriter, is_playlist

PROXY = "https://gw.example/api/cors?url="
TARGET = "https://cdn.example/live/index.m3u8"


@pytest.fixture
def rewriter() -> PlaylistRewriter:
    return PlaylistRewriter(PROXY)


class TestIsPlaylist:
    """Tests for playlist detection."""

    def test_detects_m3u8_extension(self):
        assert is_playlist("https://cdn.example/a/index.m3u8", "") is True

    def test_extension_check_ignores_query_string(self):
        assert is_playlist("https://cdn.example/index.m3u8?token=abc", None) is True

    def test_extension_check_is_case_insensitive(self):
        assert is_playlist("https://cdn.example/INDEX.M3U8", "") is True

    @pytest.mark.parametrize(
        "content_type",
        [
            "application/vnd.apple.mpegurl",
            "application/x-mpegURL",
            "audio/mpegurl; charset=utf-8",
        ],
    )
    def test_detects_playlist_content_types(self, content_type):
        assert is_playlist("https://cdn.example/play?id=1", content_type) is True

    def test_other_payloads_are_not_playlists(self):
        assert is_playlist("https://cdn.example/seg1.ts", "video/mp2t") is False


class TestRewriteUriLines:
    """Tests for plain URI lines."""

    def test_relative_segment_is_resolved_and_proxied(self, rewriter):
        result = rewriter.rewrite("#EXTM3U\n#EXTINF:10,\nseg1.ts\n", TARGET)

        assert result == (
            "#EXTM3U\n#EXTINF:10,\n"
            + PROXY
            + "https%3A%2F%2Fcdn.example%2Flive%2Fseg1.ts\n"
        )

    def test_absolute_segment_keeps_its_host(self, rewriter):
        result = rewriter.rewrite("https://other.example/x/seg.ts", TARGET)

        assert result == PROXY + "https%3A%2F%2Fother.example%2Fx%2Fseg.ts"

    def test_root_relative_segment(self, rewriter):
        result = rewriter.rewrite("/hls/seg.ts", TARGET)

        assert result == PROXY + "https%3A%2F%2Fcdn.example%2Fhls%2Fseg.ts"

    def test_parent_relative_variant(self, rewriter):
        result = rewriter.rewrite("../720p/index.m3u8", TARGET)

        assert result == PROXY + "https%3A%2F%2Fcdn.example%2F720p%2Findex.m3u8"

    def test_query_characters_are_percent_encoded(self, rewriter):
        result = rewriter.rewrite("seg.ts?a=1&b=2", TARGET)

        assert result == (
            PROXY + "https%3A%2F%2Fcdn.example%2Flive%2Fseg.ts%3Fa%3D1%26b%3D2"
        )

    def test_surrounding_whitespace_is_trimmed(self, rewriter):
        result = rewriter.rewrite("  seg1.ts  ", TARGET)

        assert result == PROXY + "https%3A%2F%2Fcdn.example%2Flive%2Fseg1.ts"


class TestRewriteTags:
    """Tests for tag lines."""

    def test_key_uri_attribute_is_rewritten(self, rewriter):
        line = '#EXT-X-KEY:METHOD=AES-128,URI="key.bin",IV=0x1'

        result = rewriter.rewrite(line, TARGET)

        assert result == (
            '#EXT-X-KEY:METHOD=AES-128,URI="'
            + PROXY
            + 'https%3A%2F%2Fcdn.example%2Flive%2Fkey.bin",IV=0x1'
        )

    def test_media_uri_attribute_is_rewritten(self, rewriter):
        line = '#EXT-X-MEDIA:TYPE=AUDIO,GROUP-ID="aud",NAME="en",URI="audio/en.m3u8"'

        result = rewriter.rewrite(line, TARGET)

        assert 'GROUP-ID="aud",NAME="en"' in result
        assert result.endswith(
            'URI="' + PROXY + 'https%3A%2F%2Fcdn.example%2Flive%2Faudio%2Fen.m3u8"'
        )

    def test_tags_without_uri_are_untouched(self, rewriter):
        text = "#EXTM3U\n#EXT-X-VERSION:3\n#EXTINF:9.009,title\n#EXT-X-ENDLIST"

        assert rewriter.rewrite(text, TARGET) == text


class TestRewriteStructure:
    """Tests for line structure preservation."""

    def test_empty_lines_are_preserved(self, rewriter):
        result = rewriter.rewrite("#EXTM3U\n\n\nseg.ts\n", TARGET)

        assert result.split("\n")[:3] == ["#EXTM3U", "", ""]
        assert result.count("\n") == 4

    def test_crlf_line_endings_are_preserved(self, rewriter):
        result = rewriter.rewrite("#EXTM3U\r\nseg.ts\r\n", TARGET)

        assert result == (
            "#EXTM3U\r\n" + PROXY + "https%3A%2F%2Fcdn.example%2Flive%2Fseg.ts\r\n"
        )

    def test_line_count_is_unchanged(self, rewriter):
        text = "\n".join(
            [
                "#EXTM3U",
                '#EXT-X-KEY:METHOD=AES-128,URI="k.key"',
                "#EXTINF:10,",
                "a.ts",
                "",
                "#EXTINF:10,",
                "b.ts",
            ]
        )

        assert len(rewriter.rewrite(text, TARGET).split("\n")) == 7

    def test_every_reference_points_back_at_the_proxy(self, rewriter):
        text = '#EXTM3U\n#EXT-X-MAP:URI="init.mp4"\n#EXTINF:4,\nchunk.m4s\n'

        lines = rewriter.rewrite(text, TARGET).split("\n")

        assert lines[1].startswith('#EXT-X-MAP:URI="' + PROXY)
        assert lines[3].startswith(PROXY)
