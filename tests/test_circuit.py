import itertools

import pytest

from practicum.circuit import (
    Circuit,
    CircuitStorage,
    InvalidCircuitError,
    parse_definition,
    parse_file_name,
    parse_run,
    tokenize_expression,
)


def test_tokenize_drops_spaces_and_quotes():
    assert tokenize_expression('"a & (b | !c)"') == "a&(b|!c)"


def test_parse_definition_fields():
    circuit = parse_definition('F(a, b) "a & b"')
    assert circuit.name == "F"
    assert circuit.arguments == ("a", "b")
    assert circuit.expression == '"a & b"'
    assert circuit.tokens == "a&b"


def test_describe_round_trip():
    circuit = parse_definition('F(a,b) "a&b"')
    assert circuit.describe() == 'F(a,b): "a&b"'
    again = parse_definition(circuit.describe().replace(":", "", 1))
    assert again == circuit


def test_invalid_token_rejected():
    with pytest.raises(InvalidCircuitError, match=r"\{c\}"):
        parse_definition('F(a,b) "a&c"')


def test_multi_character_name_rejected():
    with pytest.raises(InvalidCircuitError):
        parse_definition('FG(a) "a"')


def test_missing_quote_rejected():
    with pytest.raises(InvalidCircuitError):
        parse_definition("F(a) a")


def test_validate_on_constructed_circuit():
    with pytest.raises(InvalidCircuitError):
        Circuit("X", ("a",), '"a|z"').validate()


def test_substitute_replaces_arguments():
    circuit = parse_definition('F(a,b) "a&!b"')
    assert circuit.substitute([1, 0]) == "1&!0"


def test_substitute_leaves_unassigned_arguments():
    circuit = parse_definition('F(a,b) "a|b"')
    assert circuit.substitute([1]) == "1|b"


@pytest.mark.parametrize("values", list(itertools.product((0, 1), repeat=2)))
def test_run_and_or(values):
    conj = parse_definition('A(a,b) "a&b"')
    disj = parse_definition('O(a,b) "a|b"')
    assert conj.run(values) == int(all(values))
    assert disj.run(values) == int(any(values))


def test_negation_and_parentheses():
    circuit = parse_definition('N(a,b) "!(a|b)"')
    assert [circuit.run(v) for v in [(0, 0), (0, 1), (1, 0), (1, 1)]] == [1, 0, 0, 0]


def test_truth_rows_order_and_consistency():
    circuit = parse_definition('G(a,b,c) "a&b|c"')
    rows = list(circuit.truth_rows())
    assert len(rows) == 8
    assert [values for values, _ in rows] == list(itertools.product((0, 1), repeat=3))
    for values, result in rows:
        assert result == circuit.run(values)


def test_storage_add_find_describe():
    storage = CircuitStorage()
    first = parse_definition('F(a,b) "a&b"')
    second = parse_definition('G(x) "!x"')
    storage.add(first)
    storage.add(second)
    assert storage.find("G") is second
    assert storage.find("H") is None
    assert "F" in storage
    assert len(storage) == 2
    assert storage.describe() == [" 1." + first.describe(), " 2." + second.describe()]


def test_storage_rejects_duplicate():
    storage = CircuitStorage()
    storage.add(parse_definition('F(a) "a"'))
    with pytest.raises(ValueError, match="already exist"):
        storage.add(parse_definition('F(b) "!b"'))
    assert len(storage) == 1


def test_storage_capacity():
    storage = CircuitStorage(capacity=1)
    storage.add(parse_definition('F(a) "a"'))
    with pytest.raises(OverflowError):
        storage.add(parse_definition('G(a) "a"'))


def test_parse_run():
    assert parse_run(" F(1, 0,1)") == ("F", [1, 0, 1])


def test_parse_run_rejects_non_digit():
    with pytest.raises(ValueError):
        parse_run("F(1,x)")


def test_parse_file_name_quoted():
    assert parse_file_name('  "table.txt"') == "table.txt"


def test_parse_file_name_unquoted():
    assert parse_file_name("table.txt") == "table.txt"