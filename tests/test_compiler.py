import pytest

from querylang.compiler import (
    DEFAULT_QUERY,
    And,
    Or,
    QueryContainer,
    QueryParser,
    QuerySyntaxError,
    Word,
    compile_query,
    main,
)


def test_default_query_structure():
    container = compile_query(DEFAULT_QUERY)
    assert container == QueryContainer(
        included=(
            And((Word("lust"), Word("gluttony"))),
            Or((Word("greed"), Word("sloth"))),
        ),
        excluded=(
            Word("wrath"),
            Or((Word("envy"), Word("jealousy"))),
        ),
    )


def test_single_word():
    assert compile_query("greed") == QueryContainer((Word("greed"),), ())


def test_or_binds_looser_than_and():
    container = compile_query("a b OR c")
    assert container.included == (Or((And((Word("a"), Word("b"))), Word("c"))),)


def test_quoted_phrase_is_and_of_words():
    container = compile_query('"envy jealousy"')
    assert container.included == (And((Word("envy"), Word("jealousy"))),)


def test_quoted_single_word():
    assert compile_query('"envy"').included == (Word("envy"),)


def test_stemmer_is_applied_to_every_word():
    container = compile_query('Greed "Sloth" !Wrath', str.lower)
    assert container.included == (And((Word("greed"), Word("sloth"))),)
    assert container.excluded == (Word("wrath"),)


def test_parser_class_matches_helper():
    assert QueryParser("a (b | c)").compile() == compile_query("a (b | c)")


@pytest.mark.parametrize(
    "query",
    ["a b OR c", "(a b) c !d", '"x y" | z', "a (b | c d) !(e f)"],
)
def test_rendering_compiles_back_to_same_container(query):
    container = compile_query(query)
    assert compile_query(str(container)) == container


@pytest.mark.parametrize(
    ("query", "message"),
    [
        ("a OR", "after OR"),
        ("()", "after open parenthesis"),
        ("(a b", "close parenthesis"),
        ('""', "after quote"),
        ('"a b', "close quote"),
        ('"a OR b"', "close quote"),
        ("!wrath", "No included constraints"),
        ("", "No included constraints"),
        ("a !", "after NOT"),
        (")", "Unexpected"),
        ("| a", "Unexpected"),
    ],
)
def test_syntax_errors(query, message):
    with pytest.raises(QuerySyntaxError, match=message):
        compile_query(query)


def test_compiling_twice_fails_once_consumed():
    parser = QueryParser("greed")
    assert parser.compile().included == (Word("greed"),)
    with pytest.raises(QuerySyntaxError):
        parser.compile()


def test_main_prints_constraints(capsys):
    assert main(["greed", "!sloth"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["include greed", "exclude sloth"]


def test_main_reports_errors(capsys):
    assert main(["greed", "OR"]) == 1
    assert "after OR" in capsys.readouterr().err


def test_main_uses_default_query(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 4
    assert out[0] == "include (lust gluttony)"