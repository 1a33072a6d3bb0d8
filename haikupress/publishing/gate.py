# haikupress/publishing/gate.py

import logging
from typing import Any, Callable, Dict, Optional

from config.config_manager import PublishingConfig
from haikupress.evaluation.haiku_validator import validate_haiku
from haikupress.extraction.blocks import extract_plain_text
from haikupress.models.verdict import Invalid
from haikupress.publishing.notices import (
    EDITOR_NOTICE,
    NoticeStore,
    remove_query_arg,
    render_admin_notice,
)


class PublishRejected(Exception):
    """Raised when an API write is refused because the content is not a haiku"""

    def __init__(self, code: str, message: str, status: int, verdict: Invalid):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status = status
        self.verdict = verdict

    @property
    def editor_notice(self) -> str:
        """Generic message for editors that cannot show the specific reason"""
        return EDITOR_NOTICE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "data": {"status": self.status}
        }


class PublishGate:
    """
    Applies haiku validation to the save and publish paths of a post.

    API writes are refused outright. Form saves are downgraded to a draft,
    with the reason left in the notice store for the page shown after the
    redirect.
    """

    REST_ERROR_CODE = "rest_cannot_publish"
    REST_ERROR_STATUS = 403

    def __init__(self, publishing_config: Optional[PublishingConfig] = None,
                 notices: Optional[NoticeStore] = None,
                 extractor: Callable[[str], str] = extract_plain_text):
        self.config = publishing_config or PublishingConfig()
        self.notices = notices if notices is not None else NoticeStore()
        self.extractor = extractor
        self.logger = logging.getLogger(__name__)

    def applies_to(self, post_type: Optional[str]) -> bool:
        return post_type in self.config.post_types

    def check_rest_insert(self, post: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate a post about to be inserted through the API.

        Args:
            post: Prepared post fields (post_type, post_content, ...)

        Returns:
            The post, unchanged, when it may be written

        Raises:
            PublishRejected: If the content is not a valid haiku
        """
        post_type = post.get("post_type")
        if post_type is not None and not self.applies_to(post_type):
            self.logger.debug(f"Skipping validation for post type: {post_type}")
            return post

        verdict = validate_haiku(self.extractor(post.get("post_content") or ""))

        if isinstance(verdict, Invalid):
            self.logger.info(f"Rejected API write: {verdict.code.value}")
            raise PublishRejected(
                code=self.REST_ERROR_CODE,
                message=verdict.message,
                status=self.REST_ERROR_STATUS,
                verdict=verdict
            )

        return post

    def filter_post_data(self, data: Dict[str, Any], postarr: Dict[str, Any],
                         autosave: bool = False) -> Dict[str, Any]:
        """
        Validate post data on a form save, reverting it to draft on failure.

        Args:
            data: Post data about to be stored
            postarr: Original submitted post fields
            autosave: Whether this save is an autosave

        Returns:
            The data to store; a copy with post_status "draft" if invalid
        """
        if not self.applies_to(data.get("post_type")):
            return data

        if autosave:
            self.logger.debug("Skipping validation for autosave")
            return data

        if postarr.get("post_type") == "revision" or postarr.get("is_revision"):
            self.logger.debug(f"Skipping validation for revision of post {postarr.get('ID')}")
            return data

        verdict = validate_haiku(self.extractor(data.get("post_content") or ""))

        if isinstance(verdict, Invalid):
            self.notices.set(self.config.notice_key, verdict.message, self.config.notice_ttl)
            self.logger.info(f"Reverted post {postarr.get('ID')} to draft: {verdict.code.value}")
            return {**data, "post_status": "draft"}

        return data

    def admin_notice(self) -> str:
        """Render and clear the pending failure notice, if any."""
        message = self.notices.pop(self.config.notice_key)
        if message is None:
            return ""
        return render_admin_notice(message)

    def redirect_location(self, location: str) -> str:
        """Drop the stock "post updated" message while a failure notice is pending."""
        if self.notices.get(self.config.notice_key) is not None:
            return remove_query_arg(location, "message")
        return location
