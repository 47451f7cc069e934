from app.widgets.base import Notification, WidgetRequestError
from app.widgets.chat import ChatWidget
from app.widgets.recommendations import RecommendationWidget

__all__ = [
    "Notification",
    "WidgetRequestError",
    "ChatWidget",
    "RecommendationWidget",
]
