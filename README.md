# exercisebook

A collection of small, self-contained programs and classes. Each one is a
module you can import; ten of them can also be run as commands.

Nothing outside the Python standard library is needed.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command                   | What it does |
|---------------------------|--------------|
| `exercisebook-bank`       | Interactive menu: create a savings or checking account, log in, deposit, withdraw, view the current account, apply interest to savings, list all accounts, log out, exit. |
| `exercisebook-huffman`    | Interactive menu: encode a text file, or decode an encoded file with its dictionary file. |
| `exercisebook-phishing`   | `exercisebook-phishing [path]` scans a text file (`sus.txt` by default) for phishing keywords and prints the count of each and a total score. |
| `exercisebook-simpletron` | Reads instruction words from the keyboard (`-99999` ends the program), then runs them and prints the accumulator and instruction counter. |
| `exercisebook-morse`      | Reads a line of English text and prints it in Morse code. |
| `exercisebook-phrases`    | Prints twenty numbered random sentences. |
| `exercisebook-phone`      | Reads a telephone number written as `(xxx) xxx-xxxx` and prints the area code and the digits after the dash. |
| `exercisebook-stats`      | Reads numbers one per line, up to an empty line, and prints mean, median, minimum and maximum to two decimals. |
| `exercisebook-carbon`     | Prints the carbon footprint of a sample building, bicycle and car. |
| `exercisebook-gradebook`  | Prints a grade report for a sample class: grades, average, lowest, highest and a bar chart. |

## Modules

- `exercisebook.bank` – `Bank`, `BankAccount`, `CheckingAccount`,
  `SavingsAccount` and `BankError`. Failed operations (no one logged in,
  negative amounts, insufficient funds, wrong password, duplicate username)
  raise `BankError`. A checking account may be overdrawn for a fee of $30;
  a savings account earns interest at the bank's rate (0.05 by default).
- `exercisebook.huffman` – `Node`, `build_tree`, `code_words`, `encode`,
  `decode`, `format_dictionary`, `parse_dictionary`, `encode_file`,
  `decode_file`. `encode_file(path)` writes `<path>_encoded.txt` and
  `<path>_decoding_dictionary.txt` and returns both paths.
- `exercisebook.phishing` – `scan`, `normalize_word`, `format_report`,
  `ScanResult` and the `KEYWORDS` table of points.
- `exercisebook.simpletron` – `Simpletron` (`load`, `run`) and
  `SimpletronError`, raised for invalid words, division by zero and unknown
  instructions. Input and output go through the `read_value` and
  `write_value` callables given to the constructor.
- `exercisebook.cards` – `Card`, `Face`, `Suit`, `face_from_name`,
  `suit_from_name`, `HandOfCards` (pair, two pairs, three and four of a
  kind, flush, straight) and `DeckOfCards` (`shuffle`, `deal_card`,
  `more_cards`, `deal_poker_hand`), which takes an optional `random.Random`.
- `exercisebook.integer_set` – `IntegerSet` for integers 0 to 100, with
  `add`, `in`, `common`, `contains_set` and equality by contents.
- `exercisebook.date` – `Date` for the years 1900 to 2100, with
  `increment`, `+=` a number of days and leap-year handling.
- `exercisebook.timeofday` – `TimeOfDay` with `set_time`,
  `to_universal_string` and `to_standard_string`.
- `exercisebook.morse` – `encode_word`, `to_morse`.
- `exercisebook.phrases` – `random_sentence`, `random_sentences`.
- `exercisebook.phone` – `PhoneNumber.parse` and `split_phone_number`.
- `exercisebook.stats` – `mean`, `median`, `minimum`, `maximum`,
  `insert_into_sorted`, `sort_numbers`, `parse_numbers`. `median`,
  `minimum` and `maximum` expect numbers that are already sorted; all four
  raise `ValueError` for an empty list.
- `exercisebook.employees` – `CommissionEmployee`,
  `BasePlusCommissionEmployee`.
- `exercisebook.carbon` – `CarbonFootprint`, `Building`, `Bicycle`, `Car`.
- `exercisebook.gradebook` – `GradeBook` for exactly ten grades from 0 to
  100, with `minimum`, `maximum`, `average`, `distribution`, `bar_chart`
  and `report`.
- `exercisebook.grid` – `Grid`, a fixed-size table indexed as
  `grid[row, col]`, and `Entity`.
- `exercisebook.sequences` – `is_palindrome`, `primes_below`.
- `exercisebook.basics` – `bubble_sort`, `maximum`, `cube`,
  `times_table_line`, `truncate`.
- `exercisebook.records` – fixed-size binary records `ClientData` and
  `Person` kept in a `RecordFile` (`read`, `write`, `clear`, `records`,
  usable as a context manager), plus `format_client_report` and
  `format_people`.

## Examples

```python
from exercisebook.stats import mean, median
from exercisebook.sequences import is_palindrome, primes_below
from exercisebook.date import Date

mean([1.0, 2.0, 3.0])            # 2.0
is_palindrome("racecar")         # True
primes_below(20)                 # [2, 3, 5, 7, 11, 13, 17, 19]

day = Date(12, 31, 2015)
day.increment()
print(day)                       # January 1, 2016
```

A bank session in code:

```python
from exercisebook.bank import Bank

bank = Bank(0.05)
password = "password"
bank.create_account("alice", password, 100.0, True)
bank.login("alice", password)
bank.credit(50.0)
bank.apply_interest()
print(bank.describe_current())
bank.logout()
```

A record file:

```python
from exercisebook.records import ClientData, RecordFile, format_client_report

with RecordFile("credit.dat", ClientData, 100) as records:
    records.write(0, ClientData(1, "Ann", "Smith", 24.98))
    print(format_client_report(records.records()))
```

## What it does not do

- The bank keeps its accounts in memory only; nothing is saved between runs.
- Huffman encoding writes the code as a text file of `0` and `1`
  characters, not as packed bits, so the encoded file is not smaller than
  the original.
- There are no commands for the card, record-file, grid, date, time or
  employee modules; they are used from Python only.