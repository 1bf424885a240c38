"""Defines JotformClient object and its logic."""

from __future__ import annotations
import json
import os
from typing import Any, Iterable, List, Mapping, Optional, Union

# ----
from jotform_util.consts import (
    API_VERSION,
    BASE_URL,
    ENV_API_KEY,
    ENV_API_VERSION,
    ENV_BASE_URL,
)
from jotform_util.error import JotformUnsupportedOperationException
from jotform_util.flatten import (
    SubmissionAnswer,
    flatten_form,
    flatten_properties,
    flatten_question,
    flatten_submission,
)
from jotform_util.logger import JotformLogger
from jotform_util.result import ApiResult
from jotform_util.session import JotformSession

Submission = Union[Mapping[str, Any], Iterable[SubmissionAnswer]]


class JotformClient:
    """JotForm API client, one method per API endpoint.

    Every method returns the `content` of the response envelope,
    or None if the API responded with an error (the error is logged).
    With `raise_errors=True` the error is raised instead.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = BASE_URL,
        api_version: str = API_VERSION,
        timeout: Optional[float] = None,
        raise_errors: bool = False,
    ):
        """JotformClient constructor

        Args:
            api_key (str): JotForm API key
            base_url (str, optional): API server. Defaults to https://api.jotform.com
            api_version (str, optional): API version. Defaults to v1
            timeout (float, optional): Request timeout in seconds. Defaults to None.
            raise_errors (bool, optional): Raise on non-2xx responses instead of
                returning None. Defaults to False.
        """
        self.session = JotformSession(api_key, base_url, api_version, timeout)
        self.raise_errors = raise_errors
        self.logger: JotformLogger = JotformLogger()
        self.logger.debug(f"Initialized {repr(self)}")

    @classmethod
    def from_env(cls, **kwargs) -> JotformClient:
        """Creates a client from JOTFORM_API_KEY, JOTFORM_BASE_URL and JOTFORM_API_VERSION"""
        return cls(
            os.environ[ENV_API_KEY],
            base_url=os.getenv(ENV_BASE_URL, BASE_URL),
            api_version=os.getenv(ENV_API_VERSION, API_VERSION),
            **kwargs,
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.session.url_base}>"

    def execute(self, endpoint: str, parameters: Any = None, verb: str = "GET") -> ApiResult:
        """Performs a request and returns the full ApiResult"""
        return self.session.execute(endpoint, parameters, verb)

    def _request(self, endpoint: str, parameters: Any = None, verb: str = "GET") -> Any:
        result = self.execute(endpoint, parameters, verb)
        if self.raise_errors:
            return result.unwrap()
        return result.content

    def _get(self, endpoint: str) -> Any:
        return self._request(endpoint, verb="GET")

    def _post(self, endpoint: str, parameters: Any = None) -> Any:
        return self._request(endpoint, parameters, "POST")

    def _put(self, endpoint: str, parameters: Any = None) -> Any:
        return self._request(endpoint, parameters, "PUT")

    def _delete(self, endpoint: str) -> Any:
        return self._request(endpoint, verb="DELETE")

    # ---- user

    def get_user(self) -> Any:
        """Account type, avatar URL, name, email, website URL and account limits"""
        return self._get("user")

    def get_usage(self) -> Any:
        """Number of submissions received this month, upload space used"""
        return self._get("user/usage")

    def get_forms(self) -> Any:
        """List of forms of this account"""
        return self._get("user/forms")

    def get_submissions(self) -> Any:
        """List of submissions of this account"""
        return self._get("user/submissions")

    def get_subusers(self) -> Any:
        return self._get("user/subusers")

    def get_folders(self) -> Any:
        return self._get("user/folders")

    def get_reports(self) -> Any:
        """Reports of all forms, eg. Excel, CSV, charts, HTML tables"""
        return self._get("user/reports")

    def get_settings(self) -> Any:
        """User's time zone and language"""
        return self._get("user/settings")

    def update_settings(self, settings: Mapping[str, Any]) -> Any:
        """Updates user settings, eg. {"email": "new@example.com"}"""
        return self._post("user/settings", settings)

    def get_history(self) -> Any:
        """Activity log: forms created/modified/deleted, logins etc."""
        return self._get("user/history")

    def register_user(self, user_details: Mapping[str, Any]) -> Any:
        """Registers a new user with username, password and email"""
        return self._post("user/register", user_details)

    def login_user(self, credentials: Mapping[str, Any]) -> Any:
        """Logs a user in, returns user settings and app key"""
        return self._post("user/login", credentials)

    def logout_user(self) -> Any:
        return self._get("user/logout")

    # ---- forms

    def get_form(self, form_id: str) -> Any:
        """Form ID, status, update and creation dates, submission count etc."""
        return self._get("form/" + form_id)

    def get_form_questions(self, form_id: str) -> Any:
        return self._get("form/" + form_id + "/questions")

    def get_form_question(self, form_id: str, qid: str) -> Any:
        return self._get("form/" + form_id + "/question/" + qid)

    def get_form_properties(self, form_id: str) -> Any:
        return self._get("form/" + form_id + "/properties")

    def get_form_property(self, form_id: str, property_key: str) -> Any:
        return self._get("form/" + form_id + "/properties/" + property_key)

    def get_form_submissions(self, form_id: str) -> Any:
        return self._get("form/" + form_id + "/submissions")

    def get_form_files(self, form_id: str) -> Any:
        """Uploaded files of a form with their URLs"""
        return self._get("form/" + form_id + "/files")

    def get_form_reports(self, form_id: str) -> Any:
        return self._get("form/" + form_id + "/reports")

    def create_form(self, form: Mapping[str, Mapping[str, Any]]) -> Any:
        """Creates a new form

        Args:
            form (Mapping): {"properties": {"title": ...},
                "questions": {"1": {"type": "control_head", ...}},
                "emails": {"0": {...}}}

        Returns:
            Any: new form
        """
        return self._post("user/forms", flatten_form(form))

    def create_forms(self, forms: Union[str, Any]) -> Any:
        """Creates new forms from a JSON document"""
        return self._put("user/forms", forms)

    def clone_form(self, form_id: str) -> Any:
        return self._post("form/" + form_id + "/clone", {})

    def delete_form(self, form_id: str) -> Any:
        return self._delete("form/" + form_id)

    # ---- questions

    def create_form_question(self, form_id: str, question: Mapping[str, Any]) -> Any:
        """Adds a question, eg. {"type": "control_textbox", "text": "Name"}"""
        return self._post("form/" + form_id + "/questions", flatten_question(question))

    def create_form_questions(self, form_id: str, questions: Union[str, Any]) -> Any:
        """Adds questions from a JSON document"""
        return self._put("form/" + form_id + "/questions", questions)

    def edit_form_question(
        self, form_id: str, qid: str, question_properties: Mapping[str, Any]
    ) -> Any:
        return self._post(
            "form/" + form_id + "/question/" + qid,
            flatten_question(question_properties),
        )

    def delete_form_question(self, form_id: str, qid: str) -> Any:
        return self._delete("form/" + form_id + "/question/" + qid)

    # ---- properties

    def set_form_properties(self, form_id: str, form_properties: Mapping[str, Any]) -> Any:
        """Sets properties like label, width etc."""
        return self._post(
            "form/" + form_id + "/properties", flatten_properties(form_properties)
        )

    def set_multiple_form_properties(self, form_id: str, form_properties: Union[str, Any]) -> Any:
        """Sets properties from a JSON document"""
        return self._put("form/" + form_id + "/properties", form_properties)

    # ---- submissions

    def create_form_submissions(self, form_id: str, submission: Submission) -> Any:
        """Submits data to a form

        Args:
            form_id (str): Form ID
            submission (Mapping | Iterable[SubmissionAnswer]): Answers keyed by
                question ID, `qid_field` for sub-fields (eg. `3_first`)

        Returns:
            Any: submission ID and URL
        """
        return self._post(
            "form/" + form_id + "/submissions", flatten_submission(submission)
        )

    def get_submission(self, submission_id: str) -> Any:
        return self._get("submission/" + submission_id)

    def edit_submission(self, submission_id: str, submission: Submission) -> Any:
        """Edits a submission

        Keys are flattened the same way as in `create_form_submissions`,
        except `created_at` which is sent as `submission[created_at]`.
        Older clients sent every key unsplit here due to a precedence bug,
        callers relying on that must pass pre-split SubmissionAnswer objects.

        Args:
            submission_id (str): Submission ID
            submission (Mapping | Iterable[SubmissionAnswer]): New answers

        Returns:
            Any: status of request
        """
        return self._post(
            "submission/" + submission_id,
            flatten_submission(submission, unsplit_keys=("created_at",)),
        )

    def delete_submission(self, submission_id: str) -> Any:
        return self._delete("submission/" + submission_id)

    # ---- webhooks

    def get_form_webhooks(self, form_id: str) -> Any:
        return self._get("form/" + form_id + "/webhooks")

    def create_form_webhook(self, form_id: str, webhook_url: str) -> Any:
        """Form data is posted to `webhook_url` on every submission"""
        return self._post("form/" + form_id + "/webhooks", {"webhookURL": webhook_url})

    def delete_form_webhook(self, form_id: str, webhook_id: str) -> Any:
        """Not supported by this client"""
        raise JotformUnsupportedOperationException(
            f"Deleting webhook {webhook_id} of form {form_id} is not supported"
        )

    # ---- reports

    def get_report(self, report_id: str) -> Any:
        return self._get("report/" + report_id)

    def create_report(self, form_id: str, report: Mapping[str, Any]) -> Any:
        """Creates a report, eg. {"title": ..., "list_type": "csv"}"""
        return self._post("form/" + form_id + "/reports", report)

    def delete_report(self, report_id: str) -> Any:
        return self._delete("report/" + report_id)

    # ---- folders

    def get_folder(self, folder_id: str) -> Any:
        """Forms in a folder and folder details such as color"""
        return self._get("folder/" + folder_id)

    def create_folder(self, folder_properties: Mapping[str, Any]) -> Any:
        return self._post("folder", folder_properties)

    def update_folder(self, folder_id: str, folder_properties: Union[str, Any]) -> Any:
        """Updates a folder from a JSON document"""
        return self._put("folder/" + folder_id, folder_properties)

    def delete_folder(self, folder_id: str) -> Any:
        """Deletes a folder and its subfolders"""
        return self._delete("folder/" + folder_id)

    def add_forms_to_folder(self, folder_id: str, form_ids: List[str]) -> Any:
        return self.update_folder(folder_id, json.dumps({"forms": list(form_ids)}))

    def add_form_to_folder(self, folder_id: str, form_id: str) -> Any:
        return self.update_folder(folder_id, json.dumps({"forms": [form_id]}))

    # ---- system

    def get_plan(self, plan_name: str) -> Any:
        """Details of a plan, eg. FREE, GOLD"""
        return self._get("system/plan/" + plan_name)
