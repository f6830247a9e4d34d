from fluentsql.exceptions import FluentSQLError, SQLBuilderError


def test_exception_hierarchy() -> None:
    assert issubclass(SQLBuilderError, FluentSQLError)
    assert issubclass(FluentSQLError, Exception)


def test_builder_error_default_message() -> None:
    exc = SQLBuilderError()

    assert exc.detail == "Issues building SQL statement."
    assert str(exc) == "Issues building SQL statement."


def test_builder_error_message() -> None:
    exc = SQLBuilderError("Unsupported join type: 'X'")

    assert str(exc) == "Unsupported join type: 'X'"
    assert repr(exc) == "SQLBuilderError - Unsupported join type: 'X'"


def test_detail_keyword() -> None:
    exc = FluentSQLError("context", detail="what went wrong")

    assert exc.detail == "what went wrong"
    assert str(exc) == "context what went wrong"


def test_exception_chaining() -> None:
    try:
        try:
            raise ValueError("Original error")
        except ValueError as e:
            raise SQLBuilderError("Mapped error") from e
    except SQLBuilderError as exc:
        assert isinstance(exc.__cause__, ValueError)
