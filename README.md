# bookport

A small interactive library lending system run from the terminal. Users,
books and loan records are kept in three comma-separated text files:
`users.txt`, `books.txt` and `lend_return.txt`. They are read from the
working directory, or from the directory given with `--data-dir`. A file
that is missing is created empty the first time it is needed.

## Installing

    pip install .

## Running

    bookport
    bookport --data-dir path/to/data

The prompt `BookPort >` takes one command per line. The program ends on
`quit` or at the end of input. Each command has short forms and synonyms:

| Command   | Also accepted                        | What it does                                   |
|-----------|--------------------------------------|------------------------------------------------|
| `help`    | `?`, `h`, `he`, `hel`                | Show the command table, or help for one command |
| `quit`    | `.`                                  | Leave the program                              |
| `verify`  | `!`, `v`, `ver`, `verif`             | Check the three data files for errors          |
| `account` | `a`, `ac`, `acc`, `accoun`           | Create a new account                           |
| `login`   | `in`, `i`, `logi`, `logo`            | Log in with a student ID and password          |
| `logout`  | `out`, `o`, `ou`, `logou`            | End the current session                        |
| `search`  | `/`, `s`, `se`, `sea`, `searc`       | Find books by keyword                          |
| `borrow`  | `$`, `b`, `bo`, `bor`, `borr`, `borro` | Borrow a book by its BID                     |
| `return`  | `r`, `re`, `ret`, `retur`            | Prints that returning is not available         |
| `myinfo`  | `info`, `m`, `my`, `myi`, `myin`, `myinf` | Show your details, loan list and history  |

`help` takes at most one argument, the command to explain. No other command
takes arguments. An unknown word prints the command table.

### Commands in detail

- `search` asks for keywords, separated by spaces or tabs (at most ten are
  used). A book matches when every keyword is part of its title or author,
  or equals its BID. It asks again until something matches.
- `borrow` needs a logged-in member. It runs a search, asks for the BID of
  an available book and a loan date, and asks for confirmation (`No` in any
  case cancels). It then adds the BID to the member's loans, lowers the
  member's remaining lend count by one, marks the book as out and appends a
  record to the lend/return file.
- `myinfo` shows the member's name and ID and asks for a sub-command.
  `manage` then asks for `list` (title, author and BID of each book held) or
  `record` (every borrow and return, ordered by date). When no one is logged
  in, `myinfo` opens the login prompt instead.
- `verify` reports every line that breaks the data rules below and every
  duplicate student ID or BID. If any errors are found, the program stops
  with exit status 1.

## Data rules

- Names: English letters and spaces, 1 to 100 characters.
- Student IDs: nine digits, not starting with zero, with no digit used eight
  or more times.
- Passwords: 5 to 20 characters with no whitespace, at least one letter and
  one digit, and no character used five or more times.
- BIDs: letters, digits, `-`, `.` and `:`.
- Dates: `YYYY/MM/DD`, `YYYY-MM-DD` or `YYYYMMDD`, years 1900 to 2100.

## File formats

    users.txt        name,studentId,password,bid;bid;...,lendAvailable
    books.txt        title,author,bid,Y|N
    lend_return.txt  studentId,bid,borrowDate,returnDate,Y|N

In `lend_return.txt` a return date of `0` means the book is still out.

## Using it from Python

The validators in `bookport.validation` and the file handling in
`bookport.storage` work on their own:

    from bookport.storage import Library
    from bookport.validation import is_valid_student_id

    library = Library("data")
    print(is_valid_student_id("202312345"))
    print(library.find_user("202312345"))
    books = library.load_books()

`bookport.integrity.verify_files(library)` returns a `VerificationReport`
with the messages and the error count. `bookport.search.search_books(books,
query)` filters a list of books, and `bookport.borrow.record_loan` stores a
loan without any prompting. `bookport.cli.dispatch(session, line, ask, out)`
runs one command line against a `Session`, with the input function and
output stream of your choice.

## What it does not do

- Books cannot be returned: the `return` command only says so.
- Under `myinfo`, `withdraw` and `change` are recognised but not available.
  There is no way to delete an account or change a password.
- The number of books a member may hold is not enforced when borrowing.
- A login lasts only as long as the running program.