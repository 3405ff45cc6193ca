"""
FastAPI dependencies for per-application state.
"""
from fastapi import Request

from oilsync.config import Settings
from oilsync.services.notifications import Notifier


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_notifier(request: Request) -> Notifier:
    return request.app.state.notifier
