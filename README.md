# lunikit

A small set of text utilities with no runtime dependencies:

- `lunikit.csvstream`: a minimal delimited-text reader and writer. Inside a
  field the delimiter is escaped, not quoted (by default `,` is written as
  `##`). Quote trimming on reading and quote surrounding on writing can be
  turned on.
- `lunikit.template_token`: tokens for logic-less (mustache-style) template
  tags, and HTML escaping that can be replaced by your own function.
- `lunikit.nodes`: template data nodes: lazily computed objects, lambdas,
  emptiness checks, dotted-name lookup and rendering of single values.
- `lunikit.errors`: formatting and reporting of system error messages, and
  colored terminal output.

## Installation

```
pip install .
```

## Reading delimited text

```python
from lunikit.csvstream import CsvReader

reader = CsvReader.from_text("apple,3,1.5\npear,7,0.25\n")
while reader.read_line():
    name = reader.next_field()
    count = reader.read(int)
    price = reader.read(float)
    print(name, count, price)
```

- `CsvReader.open(path)` reads a file and can be used as a context manager.
- `rows()` yields each remaining line as a list of fields.
- `skip_line()` discards a line, for example a header.
- `delimiter_count()` and `rest_of_line()` inspect the current line.
- By default a blank line ends reading. Set `terminate_on_blank_line = False`
  to skip blank lines instead.
- `set_delimiter(delimiter, unescape_str)` changes the delimiter and its escape
  string. `enable_trim_quote(True, '"')` strips quotes around fields and ignores
  delimiters inside quoted fields.

## Writing delimited text

```python
from lunikit.csvstream import CsvWriter

writer = CsvWriter.to_string()
writer.write_row(["apple", 3, 1.5])
writer.write("a,b")   # the delimiter is escaped: a##b
writer.newline()
print(writer.text())  # "apple,3,1.5\na##b\n"
```

`CsvWriter.open(path)` writes to a file and can be used as a context manager.
`set_delimiter(delimiter, escape_str)` changes the delimiter and its escape
string. `enable_surround_quote(True, '"')` puts quotes around string fields.

The helpers `replace_all`, `trim`, `trim_left` and `trim_right` are also
available. The trim helpers leave a string unchanged if it consists only of
the trim characters.

## Template tokens

```python
from lunikit.template_token import Token, TokenType, html_escape

token = Token("{{# items }}", 2, 2)
assert token.type is TokenType.SECTION_OPEN
assert token.name == "items"
html_escape("<a href='x'>")   # '&lt;a href=&#39;x&#39;&gt;'
```

The last two arguments of `Token` are the lengths of the opening and closing
delimiters. If either is zero, the token is plain text. Text tokens record
`eol` (the text ends in a newline) and `ws_only` (the text is only whitespace).

`set_escape_function(func)` replaces the escaping done by `html_escape`.
`set_escape_function(None)` restores the default.

## Template data nodes

A node is `None`, a `str`, `int`, `float` or `bool`, a `Lambda`, a
`LazyObject`, a `dict` of nodes, or a `list` of nodes.

```python
from lunikit.nodes import find_node, is_node_empty, render_value

data = {"user": {"name": "Ada"}}
find_node("user.name", [data])   # 'Ada'
is_node_empty([])                # True
render_value(True)               # 'true'
render_value("<b>", escape=True) # '&lt;b&gt;'
```

- `LazyObject.register_methods` exposes zero-argument callables by name.
- `Lambda` wraps a function that takes no arguments or the section text.
- `has_token` and `get_token` do single-level lookup on a node.

## Error messages

```python
from lunikit.errors import SystemCallError, format_system_error

format_system_error(2, "cannot open file")
# 'cannot open file: No such file or directory' on most systems
raise SystemCallError(2, "cannot open file")
```

- `format_error_code(code, message)` gives `"message: error <code>"`. The
  message is dropped if it is too long.
- `report_system_error` writes the description and a newline to stderr, or to
  a stream you pass.
- `report_unknown_type` raises `FormatError`.
- `print_colored(Color.RED, text)` writes colored text to stdout, then resets
  the color.
- `print_to(stream, text)` writes text unchanged.

## What this package does not do

There is no function that renders a whole template. The package has no
tokenizer that splits template text into `Token`s, and nothing that walks
sections or partials. It provides only the token and node building blocks.

`lunikit.errors` formats error messages. It is not a general string-formatting
library.

There is no command-line interface.

## Tests

```
pip install .[test]
pytest
```