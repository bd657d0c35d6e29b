"""
Tests for the interactive CLI helpers.
"""

from datetime import datetime
from unittest.mock import patch

from event_planner.__main__ import display_response, main
from event_planner.core.models import ActivityCategory, AgentResponse, PlannedActivitySlot

from tests.conftest import make_place


def test_display_response(capsys):
    slot = PlannedActivitySlot(
        id="a1", title="cake", description="cake",
        start_time=datetime(2024, 5, 11, 14, 0), end_time=datetime(2024, 5, 11, 15, 0),
        category=ActivityCategory.ATTRACTION,
    )

    display_response(AgentResponse(message="Have fun!", suggestions=[make_place("p1", "Luigi's")], schedule=[slot]))

    out = capsys.readouterr().out
    assert "Planner: Have fun!" in out
    assert "- Luigi's (4.5★)" in out
    assert "Loc: p1 Main St" in out
    assert "14:00-15:00 cake [attraction]" in out


def test_display_response_message_only(capsys):
    display_response(AgentResponse(message="Hello"))

    out = capsys.readouterr().out
    assert "Suggested Places" not in out
    assert "Schedule" not in out


@patch("event_planner.__main__.EventPlanningAgent")
@patch("event_planner.__main__.validate_api_keys", return_value=False)
def test_main_stops_without_configuration(mock_validate, mock_agent, capsys):
    main()

    mock_agent.assert_not_called()
    assert "COMPLETION_API_KEY" in capsys.readouterr().out
