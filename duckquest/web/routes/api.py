"""
JSON API endpoints for the quest engine.
"""
from contextlib import contextmanager

from flask import Blueprint, current_app, jsonify, request

from config import DEFAULT_SIGNIFICANCE, SEVERITIES
from duckquest.generation import lore
from duckquest.systems.quest_tracker import NoActiveQuestError
from duckquest.transport.formatter import fmt_no_quest
from duckquest.web.config import MAX_TEXT_LENGTH

bp = Blueprint("api", __name__)


class InvalidRequest(Exception):
    """Request body failed validation."""


@contextmanager
def _engine():
    """Yield the app's engine while holding its lock."""
    with current_app.config["DUCKQUEST_ENGINE_LOCK"]:
        yield current_app.config["DUCKQUEST_ENGINE"]


def _body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _text(data: dict, key: str, required: bool = False):
    value = data.get(key)
    if value is None or (isinstance(value, str) and not value.strip()):
        if required:
            raise InvalidRequest(f"'{key}' is required")
        return None
    if not isinstance(value, str):
        raise InvalidRequest(f"'{key}' must be a string")
    if len(value) > MAX_TEXT_LENGTH:
        raise InvalidRequest(f"'{key}' is longer than {MAX_TEXT_LENGTH} characters")
    return value


@bp.errorhandler(InvalidRequest)
def bad_request(e):
    return jsonify({"error": "bad_request", "message": str(e)}), 400


@bp.errorhandler(NoActiveQuestError)
def no_active_quest(e):
    return jsonify({"error": "no_active_quest", "message": fmt_no_quest(e.operation)}), 409


# ── Quest lifecycle ────────────────────────────────────────────────────────


@bp.route("/quest", methods=["POST"])
def start_quest():
    """Open a quest. Body: {description, techStack?, urgency?}."""
    data = _body()
    description = _text(data, "description") or ""
    urgency = _text(data, "urgency")
    tech_stack = data.get("techStack") or []
    if not isinstance(tech_stack, list) or not all(isinstance(t, str) for t in tech_stack):
        raise InvalidRequest("'techStack' must be a list of strings")

    with _engine() as engine:
        quest, guidance = engine.start_quest(description, tech_stack, urgency)

    return jsonify({"quest": quest.to_dict(), "guidance": guidance.to_dict()}), 201


@bp.route("/quest/findings", methods=["POST"])
def add_finding():
    """Record a finding. Body: {finding, significance?}."""
    data = _body()
    finding = _text(data, "finding", required=True)
    significance = _text(data, "significance") or DEFAULT_SIGNIFICANCE

    with _engine() as engine:
        guidance = engine.continue_quest(finding, significance)
        phase = engine.context.current_quest.phase

    return jsonify({"phase": phase, "guidance": guidance.to_dict()})


@bp.route("/quest", methods=["GET"])
def quest_status():
    with _engine() as engine:
        snapshot = engine.get_status()
    return jsonify(snapshot.to_dict())


@bp.route("/quest/wisdom", methods=["POST"])
def seek_wisdom():
    """Targeted guidance. Body: {helpType}."""
    help_type = _text(_body(), "helpType") or "general"
    with _engine() as engine:
        guidance = engine.seek_wisdom(help_type)
    return jsonify(guidance.to_dict())


@bp.route("/quest/complete", methods=["POST"])
def complete_quest():
    """Close the active quest. Body: {solutionSummary?}."""
    summary = _text(_body(), "solutionSummary")
    with _engine() as engine:
        result = engine.complete_quest(summary)
        hero = engine.context.hero.to_dict()

    return jsonify({
        "experienceGained": result.experience_gained,
        "leveledUp": result.leveled_up,
        "hero": hero,
        "guidance": result.guidance.to_dict(),
    })


# ── Hero & lore ────────────────────────────────────────────────────────────


@bp.route("/hero")
def hero():
    """Hero progress with completed quest summaries."""
    with _engine() as engine:
        data = engine.context.hero.to_dict()
    return jsonify(data)


@bp.route("/bestiary/<bug_type>")
def bestiary(bug_type):
    bug_type = bug_type.lower()
    return jsonify({
        "bugType": bug_type,
        "known": bug_type in SEVERITIES,
        "markdown": lore.get_bug_info(bug_type),
    })


@bp.route("/handbook")
def handbook():
    return jsonify({"markdown": lore.generate_debugging_handbook()})
