"""Tests for search value objects."""

import pytest

from vodgate.domain.search import SearchChunk, SearchDone, SearchQuery, tag_item
from vodgate.domain.shared import ErrorCode, MissingParameterError
from vodgate.domain.sources import Source

SOURCE = Source(key="ffzy", name="非凡资源", api="https://x.example/vod/", active=True)


class TestSearchQuery:
    """Tests for keyword validation."""

    @pytest.mark.parametrize("keyword", [None, ""])
    def test_empty_keyword_is_rejected(self, keyword):
        with pytest.raises(MissingParameterError) as exc_info:
            SearchQuery.parse(keyword)

        assert exc_info.value.code == ErrorCode.MISSING_PARAMETER
        assert exc_info.value.message == "Missing wd"

    def test_keyword_is_kept_verbatim(self):
        assert SearchQuery.parse(" 流浪地球 ").keyword == " 流浪地球 "


class TestTagging:
    """Tests for result tagging."""

    def test_mapping_keeps_fields_and_gains_tags(self):
        tagged = tag_item({"vod_id": 1, "vod_name": "A"}, SOURCE)

        assert tagged == {
            "vod_id": 1,
            "vod_name": "A",
            "site_key": "ffzy",
            "site_name": "非凡资源",
        }

    def test_upstream_tags_are_overwritten(self):
        tagged = tag_item({"site_key": "spoofed"}, SOURCE)

        assert tagged["site_key"] == "ffzy"

    @pytest.mark.parametrize("item", ["text", 3, None, ["a"]])
    def test_non_mapping_items_become_tag_only_records(self, item):
        assert tag_item(item, SOURCE) == {"site_key": "ffzy", "site_name": "非凡资源"}

    def test_input_item_is_not_mutated(self):
        item = {"vod_id": 1}

        tag_item(item, SOURCE)

        assert item == {"vod_id": 1}


class TestEvents:
    """Tests for stream events."""

    def test_chunk_payload_is_the_tagged_list(self):
        chunk = SearchChunk.from_upstream(SOURCE, [{"vod_id": 1}, {"vod_id": 2}])

        assert len(chunk) == 2
        assert chunk.source_key == "ffzy"
        assert all(item["site_key"] == "ffzy" for item in chunk.to_payload())

    def test_done_payload_is_empty_object(self):
        assert SearchDone(sources_total=3, sources_succeeded=1).to_payload() == {}
