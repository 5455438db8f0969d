"""Default conference content and placeholder items for new entries."""
from __future__ import annotations

import copy
from typing import Any, Dict, List

SiteContent = Dict[str, Any]

_FULL_ACCESS_FEATURES = [
    "Доступ ко всем сессиям",
    "Материалы конференции",
    "Сертификат участника",
    "Запись всех выступлений",
]


def _day(date: str, sessions: List[tuple]) -> Dict[str, Any]:
    return {
        "date": date,
        "sessions": [
            {"time": time, "type": kind, "title": title, "description": description}
            for time, kind, title, description in sessions
        ],
    }


_RAW_DEFAULT_CONTENT: SiteContent = {
    "programDays": [
        _day("24 ноября", [
            ("10:00\u00a0-\u00a011:30", "Пленарная сессия",
             "Основы гештальт-терапии в современном контексте", "Основной доклад"),
            ("11:45 - 13:15", "Семинар",
             "Работа с травмой через призму гештальт-подхода", "Практический семинар"),
            ("13:15 - 14:00", "Дискуссия", "Обсуждения и QA", "Интерактивная сессия"),
        ]),
        _day("25 ноября", [
            ("10:00\u00a0-\u00a011:30", "Пленарная сессия",
             "Контакт и поддержка в онлайн-терапии", "Методологический доклад"),
            ("11:45 - 13:15", "Мастер-класс",
             "Полевые процессы в групповой работе", "Групповой опыт"),
            ("13:15 - 14:00", "Супервизия",
             "Супервизорские группы: обмен опытом", "Интерактивная сессия"),
        ]),
        _day("26 ноября", [
            ("10:00\u00a0-\u00a011:30", "Пленарная сессия",
             "Контакт и поддержка в онлайн-терапии", "Методологический доклад"),
            ("11:45 - 13:15", "Мастер-класс",
             "Полевые процессы в групповой работе", "Групповой опыт"),
            ("13:15 - 14:00", "Супервизия",
             "Супервизорские группы: обмен опытом", "Интерактивная сессия"),
        ]),
    ],
    "speakers": [
        {
            "name": "Анна Петрова",
            "role": "Ведущий гештальт-терапевт",
            "experience": "15+ лет практики",
            "description": "Специалист по работе с терапевтическим опытом. "
                           "Автор публикаций по современным подходам в гештальт-терапии.",
            "tags": ["Контакт", "Поддержка", "Травма и восстановление"],
            "photoUrl": "",
        },
        {
            "name": "Михаил Иванов",
            "role": "Супервизор, тренер",
            "experience": "20+ лет практики",
            "description": "Эксперт в области групповых процессов и полевых феноменов. "
                           "Ведущий программ подготовки терапевтов.",
            "tags": ["Супервизия", "Обучение", "Групповая терапия"],
            "photoUrl": "",
        },
        {
            "name": "Дмитрий Козлов",
            "role": "Философ, терапевт",
            "experience": "18 лет практики",
            "description": "Специалист по работе с травматическим опытом. "
                           "Автор публикаций по современным подходам в гештальт-терапии.",
            "tags": ["Философия", "Современность", "Этика терапии"],
            "photoUrl": "",
        },
        {
            "name": "Елена Смирнова",
            "role": "Клинический психолог",
            "experience": "12 лет практики",
            "description": "Пионер в области онлайн гештальт-терапии. "
                           "Исследователь цифровых особенностей контакта в цифровом пространстве.",
            "tags": ["Контакт", "Онлайн-практика", "Интеграция"],
            "photoUrl": "",
        },
    ],
    "pricingOptions": [
        {
            "label": "Лучшая цена",
            "period": "До 20 октября",
            "price": "6 000₽",
            "features": list(_FULL_ACCESS_FEATURES),
            "highlight": True,
        },
        {
            "period": "С 20 октября",
            "price": "7 000₽",
            "features": list(_FULL_ACCESS_FEATURES),
            "highlight": False,
        },
        {
            "period": "С 17 ноября и в день начала",
            "price": "8 000₽",
            "features": list(_FULL_ACCESS_FEATURES),
            "highlight": False,
        },
    ],
    "registrationNotifications": {
        "title": "Автоматические уведомления:",
        "items": [
            "Подтверждение регистрации приходит сразу после заполнения формы.",
            "Подтверждение оплаты и ссылка на Zoom — после поступления оплаты.",
            "Напоминание и ссылка — за день до начала конференции.",
        ],
    },
    "contactSection": {
        "title": "Контакты организаторов",
        "phone": "+7 495 123-45-67",
        "email": "info@gestalt.ru",
        "website": "https://gestalt.ru",
    },
}


def default_content() -> SiteContent:
    """Fresh deep copy of the default document; callers may mutate it."""
    return copy.deepcopy(_RAW_DEFAULT_CONTENT)


def empty_session() -> Dict[str, str]:
    return {
        "time": "00:00 - 00:00",
        "type": "Тип сессии",
        "title": "Название сессии",
        "description": "Описание сессии",
    }


def empty_day() -> Dict[str, Any]:
    return {"date": "Новый день", "sessions": [empty_session()]}


def empty_speaker() -> Dict[str, Any]:
    return {
        "name": "Имя спикера",
        "role": "Роль",
        "experience": "Опыт",
        "description": "Описание спикера",
        "tags": ["Новый тег"],
        "photoUrl": "",
    }


def empty_pricing_option() -> Dict[str, Any]:
    # Blank label: normalization drops it, so new options render without a badge.
    return {
        "label": "",
        "period": "Новый период",
        "price": "0₽",
        "features": ["Новое преимущество"],
        "highlight": False,
    }


__all__ = [
    "SiteContent",
    "default_content",
    "empty_session",
    "empty_day",
    "empty_speaker",
    "empty_pricing_option",
]
