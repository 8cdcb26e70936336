"""
View state containers.

Each view holds the latest snapshot for one screen together with its
draft inputs, a loading flag and a user-facing notice.
"""

from ecostay.views.base import ViewState
from ecostay.views.chat_view import ChatMessage, ChatView
from ecostay.views.dashboard_view import DashboardView
from ecostay.views.forum_view import ForumView
from ecostay.views.hostel_profile_view import HostelProfileView
from ecostay.views.hostels_list_view import HostelsListView
from ecostay.views.user_profile_view import UserProfileView
from ecostay.views.wishes_view import WishesView

__all__ = [
    "ChatMessage",
    "ChatView",
    "DashboardView",
    "ForumView",
    "HostelProfileView",
    "HostelsListView",
    "UserProfileView",
    "ViewState",
    "WishesView",
]
