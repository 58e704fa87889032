"""
Tests for the three-level Terms & Conditions controller.

Tests cover:
- Nested tree assembly and its request count
- Partial failures inside the tree
- Per-subtopic subpoint drafts
- Subtree refresh after mutations
"""

import asyncio

import pytest

from ui.services.content import PanelStatus, PendingDelete, SubpointDraft, TermsPanelController, fetch_terms_tree
from fixtures.content_fixtures import FakeContentAPI, Responses, api_error

TERMS = [
    {"id": 1, "title": "Use of service", "content": "..."},
    {"id": 2, "title": "Liability", "content": "..."},
]
SUBTOPICS = {
    1: [
        {"id": 11, "terms_id": 1, "sub_number": "1.1", "content": "Accounts"},
        {"id": 12, "terms_id": 1, "sub_number": "1.2", "content": "Conduct"},
    ],
    2: [{"id": 21, "terms_id": 2, "sub_number": "2.1", "content": "Limits"}],
}
SUBPOINTS = {
    11: [{"id": 111, "subtopic_id": 11, "point": "One account per person"}],
    12: [],
    21: [
        {"id": 211, "subtopic_id": 21, "point": "No indirect damages"},
        {"id": 212, "subtopic_id": 21, "point": "Cap at fees paid"},
    ],
}


@pytest.fixture
def terms_api():
    api = FakeContentAPI()
    api.route("GET", "terms", TERMS)
    for term_id, rows in SUBTOPICS.items():
        api.route("GET", f"terms-subtopic/{term_id}", rows)
    for subtopic_id, rows in SUBPOINTS.items():
        api.route("GET", f"terms-subpoint/{subtopic_id}", rows)
    return api


class TestTreeAssembly:
    """Building the nested tree before first display."""

    @pytest.mark.asyncio
    async def test_request_count(self, terms_api):
        tree = await fetch_terms_tree(terms_api)

        subtopic_total = sum(len(rows) for rows in SUBTOPICS.values())
        assert terms_api.request_count == 1 + len(TERMS) + subtopic_total

    @pytest.mark.asyncio
    async def test_requests_are_sequential_and_ordered(self, terms_api):
        await fetch_terms_tree(terms_api)

        assert [r.path for r in terms_api.requests] == [
            "terms",
            "terms-subtopic/1",
            "terms-subpoint/11",
            "terms-subpoint/12",
            "terms-subtopic/2",
            "terms-subpoint/21",
        ]

    @pytest.mark.asyncio
    async def test_tree_shape(self, terms_api):
        tree = await fetch_terms_tree(terms_api)

        assert [t.title for t in tree] == ["Use of service", "Liability"]
        first = tree[0].subtopics[0]
        assert first.label == "1.1"
        assert [p.point for p in first.subpoints] == ["One account per person"]
        assert len(tree[1].subtopics[0].subpoints) == 2

    @pytest.mark.asyncio
    async def test_no_terms(self):
        api = FakeContentAPI()
        assert await fetch_terms_tree(api) == []
        assert api.request_count == 1

    @pytest.mark.asyncio
    async def test_failing_subtree_yields_empty_subtopics(self, terms_api, mock_logger):
        terms_api.route("GET", "terms-subpoint/12", api_error())

        tree = await fetch_terms_tree(terms_api, mock_logger)

        assert tree[0].subtopics == ()
        assert len(tree[1].subtopics) == 1
        mock_logger.warning.assert_called_once()

    @pytest.mark.asyncio
    async def test_terms_failure_propagates(self):
        api = FakeContentAPI({("GET", "terms"): api_error()})
        panel = TermsPanelController(api)

        assert await panel.load() is False
        assert panel.notice.message == "Failed to fetch terms."
        assert panel.items == []


class TestSubpoints:
    """Inline subpoint editing, one draft per subtopic."""

    @pytest.mark.asyncio
    async def test_drafts_are_independent(self, terms_api):
        panel = TermsPanelController(terms_api)
        await panel.load()

        panel.set_subpoint_text(11, "First")
        panel.set_subpoint_text(21, "Second")

        assert panel.draft_for(11).text == "First"
        assert panel.draft_for(21).text == "Second"

    @pytest.mark.asyncio
    async def test_empty_subpoint_rejected(self, terms_api):
        panel = TermsPanelController(terms_api)
        await panel.load()
        before = terms_api.request_count

        panel.set_subpoint_text(12, "   ")
        assert await panel.submit_subpoint(12) is False

        assert panel.notice.message == "Subpoint cannot be empty."
        assert terms_api.request_count == before

    @pytest.mark.asyncio
    async def test_add_subpoint_refreshes_only_that_subtopic(self, terms_api):
        panel = TermsPanelController(terms_api)
        await panel.load()
        terms_api.route("GET", "terms-subpoint/12", [{"id": 121, "subtopic_id": 12, "point": "Be nice"}])
        panel.set_subpoint_text(21, "untouched")
        before = terms_api.request_count

        panel.set_subpoint_text(12, "Be nice")
        assert await panel.submit_subpoint(12) is True

        new_requests = [(r.method, r.path) for r in terms_api.requests[before:]]
        assert new_requests == [("POST", "terms-subpoint"), ("GET", "terms-subpoint/12")]
        assert terms_api.calls("POST")[0].payload == {"subtopic_id": 12, "point": "Be nice"}
        subtopic = panel.find(1).subtopics[1]
        assert [p.point for p in subtopic.subpoints] == ["Be nice"]
        assert panel.notice.message == "Subpoint added."
        assert 12 not in panel.subpoint_drafts
        assert panel.draft_for(21).text == "untouched"

    @pytest.mark.asyncio
    async def test_edit_subpoint_sends_point_only(self, terms_api):
        panel = TermsPanelController(terms_api)
        await panel.load()
        subpoint = panel.find(2).subtopics[0].subpoints[1]

        panel.edit_subpoint(21, subpoint)
        assert panel.draft_for(21) == SubpointDraft(text="Cap at fees paid", editing_id=212)
        panel.set_subpoint_text(21, "Cap at twice the fees paid")
        await panel.submit_subpoint(21)

        [put] = terms_api.calls("PUT", "terms-subpoint/212")
        assert put.payload == {"point": "Cap at twice the fees paid"}
        assert panel.notice.message == "Subpoint updated."

    @pytest.mark.asyncio
    async def test_cancel_subpoint_edit(self, terms_api):
        panel = TermsPanelController(terms_api)
        await panel.load()
        panel.edit_subpoint(11, panel.find(1).subtopics[0].subpoints[0])

        panel.cancel_subpoint_edit(11)

        assert panel.draft_for(11) == SubpointDraft()

    @pytest.mark.asyncio
    async def test_subpoint_error_keeps_draft(self, terms_api):
        terms_api.route("POST", "terms-subpoint", api_error())
        panel = TermsPanelController(terms_api)
        await panel.load()

        panel.set_subpoint_text(11, "Keep me")
        assert await panel.submit_subpoint(11) is False

        assert panel.notice.message == "Subpoint error."
        assert panel.draft_for(11).text == "Keep me"
        assert panel.status == PanelStatus.LOADED

    @pytest.mark.asyncio
    async def test_delete_subpoint(self, terms_api):
        panel = TermsPanelController(terms_api)
        await panel.load()
        terms_api.route("GET", "terms-subpoint/11", [])
        subpoint = panel.find(1).subtopics[0].subpoints[0]

        panel.request_subpoint_delete(11, subpoint)
        assert panel.pending_delete == PendingDelete("subpoint", 111, parent_id=11, label="One account per person")
        await panel.confirm_delete()

        assert len(terms_api.calls("DELETE", "terms-subpoint/111")) == 1
        assert panel.find(1).subtopics[0].subpoints == ()
        assert panel.notice.message == "Subpoint deleted"

    @pytest.mark.asyncio
    async def test_delete_subpoint_after_its_subtopic_vanished(self, terms_api, mock_logger):
        panel = TermsPanelController(terms_api, mock_logger)
        await panel.load()
        panel.request_subpoint_delete(11, panel.find(1).subtopics[0].subpoints[0])
        terms_api.route("GET", "terms-subtopic/1", SUBTOPICS[1][1:])
        await panel.load()
        before = terms_api.request_count

        assert await panel.confirm_delete() is True

        new_requests = [(r.method, r.path) for r in terms_api.requests[before:]]
        assert new_requests == [("DELETE", "terms-subpoint/111")]
        assert [s.id for s in panel.find(1).subtopics] == [12]
        assert panel.notice.message == "Subpoint deleted"
        mock_logger.warning.assert_called_once()


class TestSubtopics:
    """Subtopic mutations refresh the owning term's subtree."""

    @pytest.mark.asyncio
    async def test_add_subtopic_refreshes_term_subtree(self, terms_api):
        panel = TermsPanelController(terms_api)
        await panel.load()
        terms_api.route("GET", "terms-subtopic/2", SUBTOPICS[2] + [{"id": 22, "terms_id": 2, "sub_number": "2.2", "content": "Force majeure"}])
        terms_api.route("GET", "terms-subpoint/22", [])
        before = terms_api.request_count

        panel.open_subtopic_create(2)
        panel.update_subtopic_form(label="2.2", content="Force majeure")
        await panel.submit_subtopic()

        assert terms_api.calls("POST", "terms-subtopic")[0].payload == {"terms_id": 2, "sub_number": "2.2", "content": "Force majeure"}
        paths = [r.path for r in terms_api.requests[before + 1:]]
        assert paths == ["terms-subtopic/2", "terms-subpoint/21", "terms-subpoint/22"]
        assert [s.label for s in panel.find(2).subtopics] == ["2.1", "2.2"]
        # Term 1 untouched
        assert len(panel.find(1).subtopics) == 2

    @pytest.mark.asyncio
    async def test_failed_subtree_refresh_keeps_subtopics(self, terms_api, mock_logger):
        panel = TermsPanelController(terms_api, mock_logger)
        await panel.load()
        terms_api.route("GET", "terms-subtopic/1", api_error(status=503))

        panel.open_subtopic_create(1)
        panel.update_subtopic_form(label="1.3", content="Termination")
        assert await panel.submit_subtopic() is True

        assert len(terms_api.calls("POST", "terms-subtopic")) == 1
        assert [s.id for s in panel.find(1).subtopics] == [11, 12]
        assert [p.point for p in panel.find(1).subtopics[0].subpoints] == ["One account per person"]
        mock_logger.error.assert_called_once()

    @pytest.mark.asyncio
    async def test_deleting_subtopic_prunes_its_draft(self, terms_api):
        panel = TermsPanelController(terms_api)
        await panel.load()
        panel.set_subpoint_text(12, "draft")
        terms_api.route("GET", "terms-subtopic/1", SUBTOPICS[1][:1])

        panel.request_subtopic_delete(1, panel.find(1).subtopics[1])
        await panel.confirm_delete()

        assert len(terms_api.calls("DELETE", "terms-subtopic/12")) == 1
        assert 12 not in panel.subpoint_drafts

    @pytest.mark.asyncio
    async def test_stale_subtree_response_dropped(self, terms_api):
        panel = TermsPanelController(terms_api)
        await panel.load()
        release = asyncio.Event()

        async def slow_subtopics(_payload):
            await release.wait()
            return []

        terms_api.route("GET", "terms-subtopic/2", Responses(slow_subtopics, SUBTOPICS[2]))

        slow = asyncio.ensure_future(panel._refresh_subtree(2))
        await asyncio.sleep(0)
        await panel._refresh_subtree(2)
        release.set()
        await slow

        assert [s.id for s in panel.find(2).subtopics] == [21]
