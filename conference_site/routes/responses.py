"""Uniform `{success, data | error}` JSON envelope shared by the API blueprints."""
from __future__ import annotations

from typing import Any

from flask import jsonify
from flask_babel import lazy_gettext as _l

_ERROR_MESSAGES = {
    "load_failed": _l("Не удалось загрузить данные"),
    "save_failed": _l("Не удалось сохранить данные"),
    "invalid_payload": _l("Некорректные данные"),
    "admin_required": _l("Требуются права администратора"),
    "invalid_credentials": _l("Неверный логин или пароль"),
}


def error_message_for(code: str) -> str:
    message = _ERROR_MESSAGES.get(code)
    return str(message) if message is not None else code


def json_ok(data: Any, status: int = 200):
    return jsonify({"success": True, "data": data}), status


def json_error(code: str, status: int):
    return jsonify({"success": False, "error": error_message_for(code)}), status


__all__ = ["error_message_for", "json_ok", "json_error"]
