"""
Math Library Exceptions — типизированные отказы операций

Все операции Math Library либо возвращают нормализованную decimal-строку,
либо выбрасывают одно из исключений ниже. Частичные результаты не возвращаются.

Иерархия:
    MathLibraryError
    ├── InvalidNumber         (также ValueError)
    ├── DivisionByZero        (также ZeroDivisionError)
    ├── UnsupportedOperation  (также RuntimeError)
    └── Overflow              (также OverflowError)
"""


class MathLibraryError(Exception):
    """Базовое исключение Math Library."""
    pass


class InvalidNumber(MathLibraryError, ValueError):
    """
    Операнд не является валидным числом для операции.

    Примеры: строка не соответствует decimal-грамматике,
    неположительный аргумент для gamma/log_gamma, отрицательный factorial.
    """
    pass


class DivisionByZero(MathLibraryError, ZeroDivisionError):
    """Делитель (или модуль) равен нулю."""
    pass


class UnsupportedOperation(MathLibraryError, RuntimeError):
    """
    Backend не поддерживает операцию (capability gap).

    Выбрасывается вместо приближённого результата, чтобы вышестоящий слой
    мог повторить вызов на другом backend.
    """
    pass


class Overflow(MathLibraryError, OverflowError):
    """Результат превышает представимую backend'ом величину."""
    pass
