"""
Тесты для StringUtils

Проверяет:
1. Фабрику of() и запрет прямого конструктора
2. Chain-методы (регистр, trim, replace, prepend/append)
3. Семантику replace: строка — первое вхождение, шаблон — все
4. Терминальные проверки длины, пустоты и равенства
5. Инварианты trim и смены регистра
"""

import re

import pytest

from src.core.fluent import StringUtils


class TestStringFactory:
    """Тесты создания StringUtils"""

    def test_of_keeps_string(self) -> None:
        assert StringUtils.of("hello").value == "hello"

    def test_of_coerces_to_string(self) -> None:
        """Любое значение приводится к str"""
        assert StringUtils.of(123).value == "123"
        assert StringUtils.of(None).value == "None"
        assert StringUtils.of(1.5).value == "1.5"

    def test_direct_construction_forbidden(self) -> None:
        with pytest.raises(TypeError, match="use StringUtils.of"):
            StringUtils("hello")

    def test_chain_returns_same_instance(self) -> None:
        """Chain-методы изменяют и возвращают тот же объект"""
        wrapper = StringUtils.of(" x ")
        assert wrapper.trim() is wrapper
        assert wrapper.upper().append("!") is wrapper
        assert wrapper.value == "X!"


class TestCaseTransforms:
    """Тесты капитализации и смены регистра"""

    def test_capitalize_first_letter_only(self) -> None:
        assert StringUtils.of("hello").capitalize().value == "Hello"
        assert StringUtils.of("hELLO").capitalize().value == "HELLO"

    def test_capitalize_empty_noop(self) -> None:
        assert StringUtils.of("").capitalize().value == ""

    def test_capitalize_words(self) -> None:
        result = StringUtils.of("a short story about a brave knight").capitalize_words()
        assert result.value == "A Short Story About A Brave Knight"

    def test_capitalize_words_lowers_rest(self) -> None:
        assert StringUtils.of("hELLO wORLD").capitalize_words().value == "Hello World"

    def test_capitalize_words_keeps_space_runs(self) -> None:
        """Разделитель — одиночный пробел, пустые сегменты сохраняются"""
        assert StringUtils.of("hello   world ").capitalize_words().value == "Hello   World "

    def test_upper_lower(self) -> None:
        assert StringUtils.of("Mixed Case").upper().value == "MIXED CASE"
        assert StringUtils.of("Mixed Case").lower().value == "mixed case"

    @pytest.mark.parametrize("text", ["Hello World", "ALICE smith", "Привет Мир", "", "a1-B2"])
    def test_lower_after_upper_matches_lower(self, text: str) -> None:
        """Инвариант: upper().lower() == text.lower()"""
        assert StringUtils.of(text).upper().lower().value == text.lower()


class TestTrim:
    """Тесты для trim"""

    def test_ascii_whitespace(self) -> None:
        assert StringUtils.of("  \t hello \n").trim().value == "hello"

    def test_unicode_whitespace(self) -> None:
        """Неразрывный пробел и em space тоже удаляются"""
        assert StringUtils.of("\u00a0 hi \u2003").trim().value == "hi"

    @pytest.mark.parametrize("text", ["  a b  ", "\n\tx", "no-space", "   ", "\u00a0 mixed \u3000"])
    def test_trim_matches_reference(self, text: str) -> None:
        """Инвариант: результат без пробелов по краям и равен str.strip()"""
        result = StringUtils.of(text).trim().value
        assert result == text.strip()
        assert result == result.strip()


class TestReplace:
    """Тесты для replace"""

    def test_literal_replaces_first_only(self) -> None:
        assert StringUtils.of("a-b-c").replace("-", "+").value == "a+b-c"

    def test_literal_with_explicit_count(self) -> None:
        assert StringUtils.of("a-b-c").replace("-", "+", count=0).value == "a+b+c"

    def test_literal_replacement_is_verbatim(self) -> None:
        """Для строкового search обратные слэши не интерпретируются"""
        assert StringUtils.of("a.b").replace(".", r"\1").value == "a\\1b"

    def test_literal_replacement_dollar_tokens_verbatim(self) -> None:
        """$& и $1 в строковой замене не раскрываются"""
        assert StringUtils.of("price").replace("price", "[$&]").value == "[$&]"
        assert StringUtils.of("price").replace("price", "$1").value == "$1"

    def test_pattern_group_zero_wraps_match(self) -> None:
        result = StringUtils.of("price").replace(re.compile("price"), r"[\g<0>]")
        assert result.value == "[price]"

    def test_pattern_replaces_all(self) -> None:
        result = StringUtils.of("hello-world-123").replace(re.compile("-"), " ")
        assert result.value == "hello world 123"

    def test_pattern_with_count(self) -> None:
        result = StringUtils.of("a-b-c").replace(re.compile("-"), "+", count=1)
        assert result.value == "a+b-c"

    def test_pattern_template_groups(self) -> None:
        result = StringUtils.of("user@host").replace(re.compile(r"(\w+)@(\w+)"), r"\2 at \1")
        assert result.value == "host at user"

    def test_pattern_callable_receives_groups(self) -> None:
        """Функция получает совпадение и группы"""

        def mask(match: str, first: str, middle: str, domain: str) -> str:
            return first + "*" * len(middle) + domain

        result = StringUtils.of("user@example.com").replace(
            re.compile(r"^(.)(.*)(@.*)$"), mask
        )
        assert result.value == "u***@example.com"

    def test_literal_callable(self) -> None:
        result = StringUtils.of("hello world world").replace("world", lambda m: m.upper())
        assert result.value == "hello WORLD world"

    def test_no_match_unchanged(self) -> None:
        assert StringUtils.of("abc").replace("x", "y").value == "abc"

    def test_bad_group_reference_propagates(self) -> None:
        """Ошибка шаблона — ошибка вызывающего кода"""
        with pytest.raises(re.error):
            StringUtils.of("abc").replace(re.compile("a"), r"\1")


class TestPrependAppend:
    """Тесты для prepend/append"""

    def test_prepend_append_upper(self) -> None:
        result = StringUtils.of("My Article").prepend("Read: ").append("!").upper()
        assert result.value == "READ: MY ARTICLE!"

    def test_existing_content_untouched(self) -> None:
        assert StringUtils.of(" x ").prepend("[").append("]").value == "[ x ]"


class TestStringPredicates:
    """Тесты терминальных проверок"""

    def test_is_empty(self) -> None:
        assert StringUtils.of("").is_empty()
        assert StringUtils.of("   \n\t").is_empty()
        assert not StringUtils.of(" hello ").is_empty()

    def test_length_comparisons(self) -> None:
        assert StringUtils.of("abc").is_less_than(5)
        assert not StringUtils.of("abc").is_more_than(5)
        assert not StringUtils.of("superlongstring").is_less_than(10)
        assert StringUtils.of("superlongstring").is_more_than(10)

    def test_length_is_untrimmed(self) -> None:
        """Длина считается без trim"""
        assert StringUtils.of("  ab  ").is_more_than(5)

    def test_is_equal_case_sensitive(self) -> None:
        assert StringUtils.of("hello").is_equal("hello")
        assert not StringUtils.of("hello").is_equal("Hello")

    def test_predicates_do_not_mutate(self) -> None:
        wrapper = StringUtils.of("  a  ")
        wrapper.is_empty()
        wrapper.is_more_than(1)
        assert wrapper.value == "  a  "

    def test_dunder_helpers(self) -> None:
        wrapper = StringUtils.of("abc")
        assert str(wrapper) == "abc"
        assert len(wrapper) == 3
        assert bool(wrapper)
        assert not bool(StringUtils.of(""))
        assert repr(wrapper) == "StringUtils.of('abc')"
