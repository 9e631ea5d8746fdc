"""Типизированные исключения ReportDesk (без логики)."""


class ValidationError(Exception):
    """Ошибка клиента: ввод, который пользователь может исправить (пустое имя, не выбран тип)."""


class TransportError(Exception):
    """Отправка в сервис отчётов не удалась (сеть, HTTP-статус, кривой ответ)."""


class NotFoundError(Exception):
    """Запрошенной записи нет в истории."""


class DocumentError(Exception):
    """Не удалось записать документ Word."""
