import pytest

from minishell.tokens import Token, TokenType, is_blank, is_operator, tokenize


def contents(line):
    return [token.content for token in tokenize(line)]


def kinds(line):
    return [token.kind for token in tokenize(line)]


@pytest.mark.parametrize("char", [" ", "\t"])
def test_blank_characters(char):
    assert is_blank(char) is True


@pytest.mark.parametrize("char", ["a", "\n", "|", "", "  "])
def test_non_blank_characters(char):
    assert is_blank(char) is False


@pytest.mark.parametrize("char", ["<", ">", "|"])
def test_operator_characters(char):
    assert is_operator(char) is True


@pytest.mark.parametrize("char", ["a", " ", "&", ";", ""])
def test_non_operator_characters(char):
    assert is_operator(char) is False


@pytest.mark.parametrize("line", ["", "   ", "\t \t"])
def test_empty_lines_give_no_tokens(line):
    assert tokenize(line) == []


def test_simple_pipeline():
    assert tokenize("ls -l | wc") == [
        Token("ls", TokenType.WORD),
        Token("-l", TokenType.WORD),
        Token("|", TokenType.PIPE),
        Token("wc", TokenType.WORD),
    ]


def test_blanks_around_words_are_skipped():
    assert contents("  \tls\t  -a  ") == ["ls", "-a"]


@pytest.mark.parametrize(
    "text, kind",
    [
        ("<<", TokenType.HEREDOC),
        (">>", TokenType.APPEND),
        ("|", TokenType.PIPE),
        ("<", TokenType.REDIR_IN),
        (">", TokenType.REDIR_OUT),
    ],
)
def test_each_operator(text, kind):
    assert tokenize(text) == [Token(text, kind)]


def test_operators_need_no_blanks():
    assert tokenize("cat<in>out") == [
        Token("cat", TokenType.WORD),
        Token("<", TokenType.REDIR_IN),
        Token("in", TokenType.WORD),
        Token(">", TokenType.REDIR_OUT),
        Token("out", TokenType.WORD),
    ]


def test_longest_operator_is_taken_first():
    assert kinds("<<<") == [TokenType.HEREDOC, TokenType.REDIR_IN]
    assert kinds(">>>") == [TokenType.APPEND, TokenType.REDIR_OUT]
    assert kinds("||") == [TokenType.PIPE, TokenType.PIPE]


def test_heredoc_and_append():
    assert tokenize("cat << EOF >> log") == [
        Token("cat", TokenType.WORD),
        Token("<<", TokenType.HEREDOC),
        Token("EOF", TokenType.WORD),
        Token(">>", TokenType.APPEND),
        Token("log", TokenType.WORD),
    ]


@pytest.mark.parametrize("quote", ['"', "'"])
def test_quoted_word_keeps_blanks(quote):
    line = f"{quote}a b | c{quote}"
    assert tokenize(line) == [Token("a b | c", TokenType.WORD)]


def test_quoted_word_after_other_words():
    assert contents('echo "hello world"') == ["echo", "hello world"]


def test_unclosed_quote_drops_last_character():
    assert contents('"abc') == ["ab"]


def test_quoted_word_followed_by_text_runs_to_end():
    assert contents("'x y' z") == ["x y' "]


def test_empty_quotes_give_empty_word():
    assert tokenize('""') == [Token("", TokenType.WORD)]


def test_every_token_is_word_or_known_operator():
    for token in tokenize("a|b<c>d<<e>>f g"):
        if token.kind is TokenType.WORD:
            assert not any(is_operator(ch) for ch in token.content)
        else:
            assert token.content in {"|", "<", ">", "<<", ">>"}


def test_word_tokens_join_back_to_input_without_blanks():
    line = "grep -v foo|sort>out"
    assert "".join(contents(line)) == line.replace(" ", "")