from termcrawl.services.term_counter import TermCounter


def test_counts_follow_term_order():
    counter = TermCounter(["Tesla", "Elon"])
    assert counter.count("Elon founded Tesla. Elon!") == (1, 2)


def test_case_insensitive_by_default():
    assert TermCounter(["java"]).count("Java java JAVA") == (3,)


def test_case_sensitive_matching():
    assert TermCounter(["java"], case_sensitive=True).count("Java java JAVA") == (1,)


def test_terms_are_regular_expressions():
    assert TermCounter(["colou?r"]).count("colour color colr") == (2,)
    assert TermCounter(["a.b"]).count("a.b axb") == (2,)


def test_matches_do_not_overlap():
    assert TermCounter(["aa"]).count("aaaa") == (2,)
    assert TermCounter(["aba"]).count("ababab") == (1,)


def test_multi_word_terms():
    assert TermCounter(["Elon Mask"]).count("Elon Mask met elon mask") == (2,)


def test_empty_text_counts_zero():
    assert TermCounter(["x", "y"]).count("") == (0, 0)
    assert TermCounter(["x"]).count(None) == (0,)
