"""

flatten.py

Converts nested input structures into the bracket-notation keys
JotForm expects in form-encoded request bodies.

"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Union


@dataclass(frozen=True)
class SubmissionAnswer:
    """A single answer of a submission.

    `question_id` is the question's id (qid), `field` is the optional
    sub-field of compound questions (eg. `first` and `last` of a full name).
    """

    question_id: str
    value: Any
    field: Optional[str] = None

    def key(self) -> str:
        """Bracket-notation key of this answer"""
        if self.field is None:
            return f"submission[{self.question_id}]"
        return f"submission[{self.question_id}][{self.field}]"


def split_submission_key(key: str, value: Any = None) -> Optional[SubmissionAnswer]:
    """Splits a `<qid>_<field>` key into an answer carrying `value`.

    Only the first and the last token are used, eg. `3_a_b` -> (3, b).
    Returns None if the key cannot be split.
    """
    if "_" not in key:
        return None
    tokens = key.split("_")
    while tokens and tokens[-1] == "":
        tokens.pop()
    if not tokens:
        return None
    return SubmissionAnswer(tokens[0], value, tokens[-1])


def flatten_submission(
    submission: Union[Mapping[str, Any], Iterable[SubmissionAnswer]],
    unsplit_keys: Iterable[str] = (),
) -> Dict[str, Any]:
    """Flattens submission answers into `submission[qid][field]` keys

    Args:
        submission (Mapping | Iterable[SubmissionAnswer]): Either a mapping of
            `qid` or `qid_field` keys to values, or SubmissionAnswer objects
        unsplit_keys (Iterable[str], optional): Mapping keys that are never
            split on underscores. Defaults to ().

    Returns:
        dict: flattened submission
    """
    flat = {}
    if not isinstance(submission, Mapping):
        for answer in submission:
            flat[answer.key()] = answer.value
        return flat

    unsplit_keys = set(unsplit_keys)
    for key, value in submission.items():
        answer = None if key in unsplit_keys else split_submission_key(key, value)
        if answer is None:
            flat[f"submission[{key}]"] = value
        else:
            flat[answer.key()] = answer.value
    return flat


def wrap_keys(prefix: str, data: Mapping[str, Any]) -> Dict[str, Any]:
    """Wraps every key as `prefix[key]`"""
    return {f"{prefix}[{key}]": value for key, value in data.items()}


def flatten_question(question: Mapping[str, Any]) -> Dict[str, Any]:
    """{"text": "Q1"} -> {"question[text]": "Q1"}"""
    return wrap_keys("question", question)


def flatten_properties(properties: Mapping[str, Any]) -> Dict[str, Any]:
    """{"width": "600"} -> {"properties[width]": "600"}"""
    return wrap_keys("properties", properties)


def flatten_form(form: Mapping[str, Mapping[str, Any]]) -> Dict[str, Any]:
    """Flattens a new form definition

    `properties` is a mapping of property -> value, every other category
    (questions, emails, ...) is a mapping of index -> mapping of field -> value.

    Args:
        form (Mapping): {"properties": {...}, "questions": {"1": {...}}, ...}

    Returns:
        dict: {"properties[title]": ..., "questions[1][type]": ..., ...}
    """
    flat = {}
    for category, entries in form.items():
        if category == "properties":
            flat.update(wrap_keys(category, entries))
            continue
        for index, fields in entries.items():
            flat.update(wrap_keys(f"{category}[{index}]", fields))
    return flat
