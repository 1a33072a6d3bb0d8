# haikupress/publishing/__init__.py

from .notices import EDITOR_NOTICE, NoticeStore, render_admin_notice, remove_query_arg
from .gate import PublishGate, PublishRejected

__all__ = [
    "PublishGate",
    "PublishRejected",
    "NoticeStore",
    "render_admin_notice",
    "remove_query_arg",
    "EDITOR_NOTICE"
]
