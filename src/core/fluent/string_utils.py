"""
StringUtils — Chainable-обёртка над строкой

Нормализация и преобразование текста цепочкой вызовов плюс терминальные
проверки длины, пустоты и равенства.

Пример:
    >>> StringUtils.of("  ALICE SMITH  ").trim().lower().capitalize().replace(
    ...     "smith", "Jones"
    ... ).value
    'Alice Jones'
"""

import re
from typing import Any, Callable, Optional, Union

from src.core.fluent.base import FluentWrapper

Replacement = Union[str, Callable[..., str]]


class StringUtils(FluentWrapper[str]):
    """Fluent-обёртка над str"""

    __slots__ = ()

    @classmethod
    def of(cls, initial: Any) -> "StringUtils":
        """
        Фабрика: любое значение приводится к str, исключений нет.
        """
        return cls._create(str(initial))

    # =========================================================================
    # CHAIN-МЕТОДЫ
    # =========================================================================

    def capitalize(self) -> "StringUtils":
        """
        Первый символ в верхний регистр, остальное без изменений.

        В отличие от str.capitalize() хвост строки не понижается.
        """
        if self._value:
            self._value = self._value[0].upper() + self._value[1:]
        return self

    def capitalize_words(self) -> "StringUtils":
        """
        Каждое слово (разделитель — одиночный пробел): первая буква
        в верхний регистр, остальные в нижний.

        Последовательности пробелов сохраняются как есть.
        """
        self._value = " ".join(
            word[:1].upper() + word[1:].lower() for word in self._value.split(" ")
        )
        return self

    def upper(self) -> "StringUtils":
        self._value = self._value.upper()
        return self

    def lower(self) -> "StringUtils":
        self._value = self._value.lower()
        return self

    def trim(self) -> "StringUtils":
        """Удаление пробельных символов (включая Unicode) по краям"""
        self._value = self._value.strip()
        return self

    def replace(
        self,
        search: Union[str, "re.Pattern[str]"],
        replacement: Replacement,
        count: Optional[int] = None,
    ) -> "StringUtils":
        """
        Замена подстроки или совпадений шаблона.

        Правила:
        - search строка: заменяется только первое вхождение (count=1)
        - search скомпилированный re.Pattern: заменяются все совпадения (count=0)
        - replacement строка: для строкового search вставляется буквально,
          для шаблона — как шаблон re.sub (\\1, \\g<name>).
          Токены JS String.prototype.replace ($&, $1) не раскрываются:
          используйте re.Pattern с \\g<0>/\\1 или callable
        - replacement callable: вызывается как fn(match, *groups)

        Некорректный шаблон — ошибка вызывающего кода (re.error пробрасывается).

        Args:
            search: Подстрока или скомпилированный шаблон
            replacement: Строка или функция, возвращающая строку замены
            count: Явное ограничение числа замен (0 — все)

        Returns:
            self для продолжения цепочки
        """
        if isinstance(search, re.Pattern):
            limit = 0 if count is None else count
            if callable(replacement):
                func = replacement
                self._value = search.sub(
                    lambda m: func(m.group(0), *m.groups()), self._value, count=limit
                )
            else:
                self._value = search.sub(replacement, self._value, count=limit)
            return self

        limit = 1 if count is None else count
        if callable(replacement):
            self._value = self._replace_literal(search, replacement, limit)
        else:
            self._value = self._value.replace(search, replacement, limit or -1)
        return self

    def _replace_literal(self, search: str, func: Callable[..., str], limit: int) -> str:
        pattern = re.compile(re.escape(search))
        return pattern.sub(lambda m: func(m.group(0)), self._value, count=limit)

    def prepend(self, prefix: str) -> "StringUtils":
        self._value = str(prefix) + self._value
        return self

    def append(self, suffix: str) -> "StringUtils":
        self._value = self._value + str(suffix)
        return self

    # =========================================================================
    # ТЕРМИНАЛЬНЫЕ ПРОВЕРКИ
    # =========================================================================

    def is_empty(self) -> bool:
        """Пустая строка или только пробельные символы"""
        return len(self._value.strip()) == 0

    def is_less_than(self, length: int) -> bool:
        """Длина (без trim) меньше length"""
        return len(self._value) < length

    def is_more_than(self, length: int) -> bool:
        """Длина (без trim) больше length"""
        return len(self._value) > length

    def is_equal(self, other: str) -> bool:
        """Точное совпадение с учётом регистра"""
        return self._value == other

    def __len__(self) -> int:
        return len(self._value)

    def __bool__(self) -> bool:
        return bool(self._value)
