"""Tests for xmltok utility modules."""


class TestLogger:
    """Tests for logger module."""

    def test_get_logger(self) -> None:
        from xmltok.utils.logger import get_logger

        logger = get_logger("mymodule")
        assert logger.name == "xmltok.mymodule"

    def test_logger_with_xmltok_prefix(self) -> None:
        from xmltok.utils.logger import get_logger

        logger = get_logger("xmltok.lexer.core")
        assert logger.name == "xmltok.lexer.core"

    def test_logger_name_starting_with_xmltok_not_submodule(self) -> None:
        """Names starting with 'xmltok' but not submodules should get prefix."""
        from xmltok.utils.logger import get_logger

        logger = get_logger("xmltok_other")
        assert logger.name == "xmltok.xmltok_other"

    def test_logger_exact_xmltok_name(self) -> None:
        """The exact name 'xmltok' should not get double-prefixed."""
        from xmltok.utils.logger import get_logger

        logger = get_logger("xmltok")
        assert logger.name == "xmltok"

    def test_tokenizer_failure_is_logged(self, caplog) -> None:
        import logging

        from xmltok import Tokenizer

        caplog.set_level(logging.DEBUG, logger="xmltok")
        Tokenizer(b"oops").pull()
        messages = [r.getMessage() for r in caplog.records if r.name == "xmltok.lexer.core"]
        assert any("invalid byte" in m for m in messages)


class TestUtilsPublicAPI:
    """Tests for the public API of the utils package."""

    def test_all_exports_importable(self) -> None:
        """All items in __all__ should be importable from xmltok.utils."""
        import xmltok.utils as utils

        for name in utils.__all__:
            assert hasattr(utils, name), f"{name} in __all__ but not importable"

    def test_expected_exports(self) -> None:
        from xmltok.utils import get_logger

        assert callable(get_logger)


class TestSourceLocation:
    """Tests for SourceLocation formatting."""

    def test_one_based_display(self) -> None:
        from xmltok.location import SourceLocation

        assert str(SourceLocation(line=0, column=4, offset=4, end_offset=7)) == "1:5"

    def test_with_file(self) -> None:
        from xmltok.location import SourceLocation

        loc = SourceLocation(2, 0, 30, 30, "maps/level.xml")
        assert str(loc) == "maps/level.xml:3:1"


class TestErrors:
    """Tests for error classes."""

    def test_xmltok_error(self) -> None:
        from xmltok.errors import XmlTokError

        error = XmlTokError("Something went wrong")
        assert str(error) == "Something went wrong"

    def test_tokenize_error_with_location(self) -> None:
        from xmltok.errors import ErrorNote, TokenizeError

        error = TokenizeError(ErrorNote.INVALID_BYTE, line=9, column=4)
        assert "10:5" in str(error)
        assert "invalid byte" in str(error)

    def test_tokenize_error_with_file(self) -> None:
        from xmltok.errors import ErrorNote, TokenizeError

        error = TokenizeError(ErrorNote.INVALID_BYTE, line=9, source_file="test.xml")
        assert "test.xml" in str(error)
