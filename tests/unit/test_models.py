"""Unit tests for buildnotice data models.

Covers status metadata, robot traits and lookup, BuildEvent validation
and derived properties, and the outbound draft/message models.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from buildnotice.exceptions import BuildNoticeError, UnknownRobotError
from buildnotice.models.build_event import NOT_STARTED, BuildEvent
from buildnotice.models.message import Button, MsgType, OutboundDraft, OutboundMessage
from buildnotice.models.robots import RobotProfile, RobotType
from buildnotice.models.status import BuildStatus, StatusMetadata


# ---------------------------------------------------------------------------
# Test: BuildStatus
# ---------------------------------------------------------------------------


class TestBuildStatus:
    def test_every_status_has_label_and_color(self):
        for status in BuildStatus:
            assert status.label
            assert status.color

    def test_success_metadata(self):
        assert BuildStatus.SUCCESS.label == "成功"
        assert BuildStatus.SUCCESS.color == "green"

    def test_failure_metadata(self):
        assert BuildStatus.FAILURE.label == "失败"
        assert BuildStatus.FAILURE.color == "red"

    def test_satisfies_protocol(self):
        assert isinstance(BuildStatus.ABORTED, StatusMetadata)

    def test_lookup_by_value(self):
        assert BuildStatus("unstable") is BuildStatus.UNSTABLE


# ---------------------------------------------------------------------------
# Test: RobotType
# ---------------------------------------------------------------------------


class TestRobotType:
    def test_lark_traits(self):
        assert RobotType.LARK.requires_leading_tag_block is False
        assert RobotType.LARK.status_tag_name == "text_tag"

    def test_ding_talk_traits(self):
        assert RobotType.DING_TALK.requires_leading_tag_block is True
        assert RobotType.DING_TALK.status_tag_name == "font"

    def test_satisfies_protocol(self):
        for robot in RobotType:
            assert isinstance(robot, RobotProfile)

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("lark", RobotType.LARK),
            ("LARK", RobotType.LARK),
            ("feishu", RobotType.LARK),
            ("ding_talk", RobotType.DING_TALK),
            ("ding-talk", RobotType.DING_TALK),
            (" DingTalk ", RobotType.DING_TALK),
        ],
    )
    def test_from_name(self, name: str, expected: RobotType):
        assert RobotType.from_name(name) is expected

    def test_from_name_unknown_raises(self):
        with pytest.raises(UnknownRobotError) as exc_info:
            RobotType.from_name("slack")
        assert exc_info.value.name == "slack"
        assert isinstance(exc_info.value, BuildNoticeError)
        assert isinstance(exc_info.value, ValueError)


# ---------------------------------------------------------------------------
# Test: BuildEvent
# ---------------------------------------------------------------------------


class TestBuildEvent:
    def test_minimal_event(self):
        event = BuildEvent(project_name="svc", status_type=BuildStatus.START)
        assert event.duration == NOT_STARTED
        assert event.content is None
        assert event.git_commit_id is None

    def test_status_is_required(self):
        with pytest.raises(ValidationError):
            BuildEvent(project_name="svc")  # type: ignore[call-arg]

    def test_null_status_rejected(self):
        with pytest.raises(ValidationError):
            BuildEvent(project_name="svc", status_type=None)  # type: ignore[arg-type]

    def test_project_name_is_required(self):
        with pytest.raises(ValidationError):
            BuildEvent(status_type=BuildStatus.SUCCESS)  # type: ignore[call-arg]

    def test_status_from_string(self):
        event = BuildEvent(project_name="svc", status_type="failure")
        assert event.status_type is BuildStatus.FAILURE

    def test_frozen(self, make_build_event):
        event = make_build_event()
        with pytest.raises(ValidationError):
            event.git_commit_id = "changed"  # type: ignore[misc]

    def test_derived_environment(self, make_build_event):
        assert make_build_event(project_name="shop-prod").environment == "生产环境"

    def test_derived_short_commit(self, make_build_event):
        assert make_build_event().short_commit_id == "a1b2c3d4"
        assert make_build_event(git_commit_id=None).short_commit_id == "null"

    def test_derivation_does_not_mutate(self, make_build_event):
        event = make_build_event()
        _ = event.short_commit_id
        assert event.git_commit_id == "a1b2c3d4e5f6"

    def test_has_started(self, make_build_event):
        assert make_build_event().has_started is False
        assert make_build_event(duration="1m").has_started is True


# ---------------------------------------------------------------------------
# Test: OutboundDraft / OutboundMessage
# ---------------------------------------------------------------------------


class TestOutboundModels:
    def test_draft_defaults_to_card(self):
        draft = OutboundDraft(status_type=BuildStatus.SUCCESS)
        assert draft.kind == MsgType.CARD
        assert draft.buttons == ()

    def test_with_text_keeps_draft_fields(self):
        buttons = (Button(title="控制台", url="https://ci/1/console"),)
        draft = OutboundDraft(status_type=BuildStatus.FAILURE, buttons=buttons, title="t")

        message = draft.with_text("body", at_mobiles=["138"], at_open_ids=iter(["ou_1"]))

        assert isinstance(message, OutboundMessage)
        assert message.kind == MsgType.CARD
        assert message.status_type is BuildStatus.FAILURE
        assert message.buttons == buttons
        assert message.title == "t"
        assert message.text == "body"
        assert message.at_all is False
        assert message.at_mobiles == ("138",)
        assert message.at_open_ids == ("ou_1",)

    def test_with_text_leaves_draft_untouched(self):
        draft = OutboundDraft(status_type=BuildStatus.SUCCESS, title="t")
        draft.with_text("body", at_all=True)
        assert not hasattr(draft, "text")

    def test_message_is_frozen(self):
        message = OutboundDraft(status_type=BuildStatus.SUCCESS).with_text("x")
        with pytest.raises(ValidationError):
            message.text = "y"  # type: ignore[misc]
