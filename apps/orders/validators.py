"""
Optional checks of submitted answers against the order's questionnaire.
Only applied when ORDERS["STRICT_REQUIREMENT_ANSWERS"] is on.
"""
from rest_framework.exceptions import ValidationError

from apps.freelancer.requirements import (
    TEXT,
    TEXTAREA,
    MULTIPLE_CHOICE,
    FILE,
    INSTRUCTIONS,
)


def _has_answer(requirement, answer):
    if answer is None:
        return False
    kind = requirement.get("type")
    if kind in (TEXT, TEXTAREA):
        return bool((answer.get("text") or "").strip())
    if kind == MULTIPLE_CHOICE:
        return bool(answer.get("options"))
    if kind == FILE:
        return bool(answer.get("files"))
    return True


def _matches_accepts(filename, accepts):
    if not accepts:
        return True
    name = filename.lower()
    for pattern in accepts:
        pattern = pattern.lower().strip()
        # mime types cannot be checked from a name alone
        if "/" in pattern:
            return True
        if name.endswith(pattern if pattern.startswith(".") else f".{pattern}"):
            return True
    return False


def check_answers(snapshot, answers):
    """
    Raises ValidationError keyed by requirement id.
    `answers` must already be limited to ids present in `snapshot`.
    """
    by_id = {answer["id"]: answer for answer in answers}
    errors = {}

    for requirement in snapshot:
        req_id = requirement.get("id")
        kind = requirement.get("type")
        if kind == INSTRUCTIONS:
            continue

        answer = by_id.get(req_id)
        if requirement.get("required") and not _has_answer(requirement, answer):
            errors[req_id] = "This requirement is required."
            continue
        if answer is None:
            continue

        if kind == MULTIPLE_CHOICE:
            chosen = answer.get("options") or []
            allowed = set(requirement.get("options") or [])
            if any(option not in allowed for option in chosen):
                errors[req_id] = "Select one of the offered options."
            elif len(chosen) > 1 and not requirement.get("allowMultiple"):
                errors[req_id] = "Only one option may be selected."

        elif kind == FILE:
            files = answer.get("files") or []
            max_files = requirement.get("maxFiles") or 1
            if len(files) > max_files:
                errors[req_id] = f"At most {max_files} file(s) allowed."
            elif any(not _matches_accepts(f.get("name", ""), requirement.get("accepts")) for f in files):
                errors[req_id] = "File type not accepted."

    if errors:
        raise ValidationError({"answers": errors})
