from __future__ import annotations

import importlib

import pytest

from config import get_settings_module
from src.attendance_dashboard.attendance_dashboard.container import build_container
from src.attendance_dashboard.attendance_dashboard.main import create_container


def test_settings_module_from_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    assert get_settings_module() == "config.testing"
    monkeypatch.setenv("APP_ENV", "prod")
    assert get_settings_module() == "config.production"
    monkeypatch.delenv("APP_ENV")
    assert get_settings_module() == "config.development"


def test_create_container_from_testing_settings(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    settings = importlib.import_module("config.testing")

    container = create_container()

    assert len(container.store.students) == 5
    assert container.dashboard_service.class_overview().summary.total == 10
    assert settings.TESTING is True


def test_services_share_one_store():
    container = build_container(seed_demo_data=False)

    assert container.store.students == ()
    container.store.link_student_to_user("missing", "u")
    assert container.dashboard_service.class_summaries() == []


def test_invalid_upload_policy_rejected():
    with pytest.raises(ValueError):
        build_container(upload_unknown_status="ignore")
