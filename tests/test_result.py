import pytest

from password_ruler.result import OK, FailedResult, Failure, OkResult, failed, ok


class TestFailure:
    def test_equality_by_reason_and_parameters(self):
        assert Failure("length.tooShort", {"minimumLength": 8}) == Failure(
            "length.tooShort", {"minimumLength": 8}
        )
        assert Failure("length.tooShort", {"minimumLength": 8}) != Failure(
            "length.tooShort", {"minimumLength": 9}
        )
        assert Failure("a") != Failure("b")

    def test_hashable(self):
        failures = {Failure("noWhitespace"), Failure("noWhitespace")}
        assert len(failures) == 1

    def test_equality_ignores_parameter_order(self):
        left = Failure("r", {"a": 1, "b": 2})
        right = Failure("r", {"b": 2, "a": 1})
        assert left == right
        assert hash(left) == hash(right)

    def test_hashable_with_unhashable_parameter_values(self):
        failure = Failure("r", {"characters": ["a", "b"]})
        assert failure in {failure}
        assert failure == Failure("r", {"characters": ["a", "b"]})
        assert failure != Failure("r", {"characters": ["a"]})
        assert hash(FailedResult([failure]).finalize()) == hash(
            FailedResult([Failure("r", {"characters": ["a", "b"]})]).finalize()
        )

    def test_parameters_preserve_insertion_order(self):
        failure = Failure("r", {"b": 1, "a": 2})
        assert list(failure.parameters) == ["b", "a"]

    def test_parameters_are_read_only(self):
        source = {"minimumLength": 8}
        failure = Failure("length.tooShort", source)
        source["minimumLength"] = 1

        assert failure.parameters["minimumLength"] == 8
        with pytest.raises(TypeError):
            failure.parameters["minimumLength"] = 2  # type: ignore[index]

    def test_reason_must_be_string(self):
        with pytest.raises(TypeError):
            Failure(None)  # type: ignore[arg-type]


class TestOkResult:
    def test_singleton(self):
        assert ok() is OK
        assert OkResult() is OK

    def test_valid_without_failures(self):
        assert OK.is_valid
        assert OK.failures == ()
        assert bool(OK)

    def test_repr(self):
        assert repr(OK) == "RuleResult.ok()"


class TestFailedResult:
    def test_failed_without_reason_holds_no_failure(self):
        result = failed()
        assert not result.is_valid
        assert result.failures == ()
        assert not bool(result)

    def test_failed_with_reason_and_parameters(self):
        result = failed("characters.asciiDigits", characters="0123456789", numberOfCharacters=2)
        assert result.failures == (
            Failure(
                "characters.asciiDigits",
                {"characters": "0123456789", "numberOfCharacters": 2},
            ),
        )

    def test_add_failure_chains_in_order(self):
        result = (
            FailedResult()
            .add_failure("first")
            .add_failure("second", {"key": 1})
            .add_failure("third", key=2)
            .finalize()
        )
        assert [f.reason for f in result.failures] == ["first", "second", "third"]
        assert result.failures[1].parameters == {"key": 1}
        assert result.failures[2].parameters == {"key": 2}

    def test_add_failures(self):
        result = FailedResult().add_failures([Failure("a"), Failure("b")])
        assert result.failures == (Failure("a"), Failure("b"))

    def test_finalized_result_rejects_additions(self):
        result = failed("noWhitespace")
        assert result.is_finalized
        with pytest.raises(RuntimeError):
            result.add_failure("other")
        with pytest.raises(RuntimeError):
            result.add_failures([Failure("other")])

    def test_equality_and_hash_by_failures(self):
        left = failed("length.tooShort", minimumLength=8)
        right = FailedResult([Failure("length.tooShort", {"minimumLength": 8})]).finalize()
        assert left == right
        assert hash(left) == hash(right)
        assert left != failed("length.tooLong", maximumLength=8)

    def test_never_equal_to_ok(self):
        assert failed() != OK
        assert OK != failed()

    def test_failures_snapshot_is_immutable(self):
        result = FailedResult().add_failure("a")
        snapshot = result.failures
        result.add_failure("b")
        assert snapshot == (Failure("a"),)
        assert len(result.failures) == 2
