# practicum

A collection of small programming exercises, covering integer and real
arithmetic, unit conversions, number systems, bit manipulation and Boolean
logic, plus a console simulator for digital integrated circuits defined by
logical expressions.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Library overview

| Module | Contents |
| --- | --- |
| `practicum.numbers` | integer exercises: `add`, `is_even`, `reverse_digits`, `factorial`, `digit_sum`, `sum_to`, `truncated_divmod`, `divisors_among`, ... |
| `practicum.measures` | conversions: `celsius_to_fahrenheit`, `miles_to_kilometres`, `split_hms`, `split_ymd`, `days_between`, `convert_leva`, ... |
| `practicum.realmath` | real-number exercises: `mean`, `deviations`, `geometric_mean`, `slope`, `can_form_triangle`, ... |
| `practicum.bits` | number systems and bitwise work: `to_binary`, `to_octal`, `to_hex`, `from_base`, `ieee754_parts`, `bitwise_strings`, `apply_bit_op`, `set_bit`, `clear_bit`, `BitOp` |
| `practicum.formulas` | `BodyMassIndex`, `VerticalCylinder`, `HorizontalCylinder`, `max_per_triple`, `max_per_triple_file`, `xor_swap` |
| `practicum.logic` | `radix_strings`, `logical_xor`, `xor_pairs` and three forms of one Boolean function (`function_by_ones`, `function_by_zeros`, `function_minimized`) |
| `practicum.floating` | `kahan_sum` versus `plain_sum`, the comparisons `equal_exact`, `equal_static`, `equal_dynamic`, and `compare_sums` returning a `ComparisonReport` |
| `practicum.attendance` | `Attendance`, a presence bit mask for students 0 to 63 |
| `practicum.cli_tools` | `circle` (with pi taken as 3.14), `calculate`, `count_matching_lines` |
| `practicum.expression` | `infix_to_postfix`, `evaluate_postfix`, `operator_precedence` and `synthesis_by_one` for `&`, `|`, `!` expressions |
| `practicum.truthtable` | `TruthTable`, `parse_truth_table_text`, `load_truth_table` and `find_expression` |
| `practicum.circuit` | `Circuit`, `CircuitStorage`, `InvalidCircuitError` and the parsers `parse_definition`, `parse_run`, `parse_file_name` |
| `practicum.simulator` | the interactive `Simulator`, `Command` and `parse_command` |

A few calls:

```python
from practicum.numbers import add, reverse_digits
from practicum.bits import to_binary, from_base
from practicum.circuit import parse_definition

add(2, 3)              # 5
reverse_digits(123)    # "321"
to_binary(10)          # "1010"
from_base("ff", 16)    # 255

circuit = parse_definition('f(a,b): "a & !b"')
circuit.run([1, 0])    # 1
```

Functions raise exceptions, such as `ValueError` or `ZeroDivisionError`,
for the inputs that the exercises reject: negative amounts, division by
zero, student ids outside 0 to 63, and so on.

## Commands

### Circuit simulator

```
practicum-simulator
```

Prints a menu and then reads commands from standard input, one per line:

```
DEFINE f(a,b,c): "a & (b | !c)"
RUN f(1,0,0)
ALL f
FIND "table.txt"
PRINT
EXIT
```

* `DEFINE` creates a circuit with a single-character name, its
  single-character arguments and a double-quoted expression built from the
  arguments, `&`, `|`, `!` and parentheses. A name that is already defined
  is refused.
* `RUN` evaluates a defined circuit for the given single-digit inputs and
  prints `Result: ...`.
* `ALL` prints every input combination of a circuit with its output.
* `FIND` reads a truth table from the quoted file (rows of whitespace
  separated 0/1 values, the last column being the output), prints it, and
  prints a disjunction of minterms over `a`, `b`, `c`, ... that realises it.
* `PRINT` lists all defined circuits, numbered.
* `EXIT` leaves the program; so does the end of input.

### Other tools

```
practicum-attendance           # interactive class attendance menu
practicum-floats [--seed N]    # Kahan versus plain summation report on random values
practicum-circle               # perimeter and area for each radius read from input
practicum-calc 3 x 4           # two-operand calculator: +, -, x or *, /
practicum-count word < file    # counts the input lines equal to "word"
```

## Limitations

* Circuits defined in the simulator exist only for the session: there is no
  command to save them or load them back, and at most 100 can be defined.
* Circuit names and arguments are single characters, and `RUN` accepts only
  single-digit input values.
* `FIND` builds an expression over the letters `a`, `b`, `c`, ... from the
  table's rows; it does not look the result up among the defined circuits.