"""
End-to-end translation tests - text_translateAll()

Tests whole pieces of free-form text: plain text, sibling and nested
directives, parameters, context, and malformed markup.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from bracketeer.lib.resolver import directive_resolve, substitute_make, text_translateAll
from bracketeer.lib.scanner import directive_locate


def upper(term, context):
    return term.upper()


def identity(term, context):
    return term


class TestPassThrough:
    """Text without complete directives comes back unchanged"""

    def test_plain_text(self):
        original = "The quick brown fox jumps over the lazy dog."

        assert text_translateAll(original, upper) == original

    def test_empty_text(self):
        assert text_translateAll("", upper) == ""

    def test_closing_tokens_only(self):
        original = "Nothing ]]] to see ]]] here"

        assert text_translateAll(original, upper) == original

    def test_unclosed_directive(self):
        original = "The quick brown fox [[[jumps over the lazy dog."

        assert text_translateAll(original, upper) == original

    def test_unclosed_directive_hides_later_valid_one(self):
        """No recovery past an orphaned opening token"""
        original = "[[[x [[[y]]] z and [[[w]]]"

        assert text_translateAll(original, upper) == original
        assert text_translateAll("[[[x [[[y]]] z", upper) == "[[[x [[[y]]] z"

    def test_invalid_bracket_after_valid_one(self):
        original = "The [[[quick]]] brown fox [[[jumps [[[and leaps]]] over the lazy dog."
        expected = "The QUICK brown fox [[[jumps [[[and leaps]]] over the lazy dog."

        assert text_translateAll(original, upper) == expected

    def test_valid_then_orphan(self):
        assert text_translateAll("[[[a]]] [[[b", upper) == "A [[[b"


class TestTopLevel:
    """Directives at the top level of the text"""

    def test_single_directive(self):
        assert text_translateAll("X [[[jumps]]] Y", upper) == "X JUMPS Y"

    def test_one_embedded_directive(self):
        original = "The quick brown fox [[[jumps]]] over the lazy dog."
        expected = "The quick brown fox JUMPS over the lazy dog."

        assert text_translateAll(original, upper) == expected

    def test_multiple_siblings(self):
        assert text_translateAll("[[[quick]]] [[[brown]]] [[[jumps]]]", upper) == "QUICK BROWN JUMPS"

    def test_multiple_embedded_directives(self):
        original = "The [[[quick]]] [[[brown]]] fox [[[jumps]]] over the lazy dog."
        expected = "The QUICK BROWN fox JUMPS over the lazy dog."

        assert text_translateAll(original, upper) == expected

    def test_adjacent_directives(self):
        assert text_translateAll("[[[a]]][[[b]]]", upper) == "AB"

    def test_stray_closing_token_before_directive(self):
        assert text_translateAll("x ]]] y [[[z]]]", upper) == "x ]]] y Z"

    def test_default_lookup_is_identity(self):
        assert text_translateAll("The [[[%0 fox|||quick]]] jumps") == "The quick fox jumps"


class TestParametersAndContext:
    """Parameters and context through the full driver"""

    def test_parameters(self):
        original = "The [[[%0 %1 fox|||quick|||brown]]] jumps over the lazy dog."
        expected = "The quick brown fox jumps over the lazy dog."

        assert text_translateAll(original, identity) == expected

    def test_translated_parameters(self):
        original = "The [[[%0 %1 fox|||(((quick)))|||brown]]] jumps over the lazy dog."
        expected = "The SPEEDY brown fox jumps over the lazy dog."

        def lookup(term, context):
            return "SPEEDY" if term == "quick" else term

        assert text_translateAll(original, lookup) == expected

    def test_context_passed_through(self):
        original = "The quick brown fox [[[jumps///CONTEXT]]] over the lazy dog."
        expected = "The quick brown fox bounces over the lazy dog."

        def lookup(term, context):
            return "bounces" if context == "CONTEXT" and term == "jumps" else "--FAILED--"

        assert text_translateAll(original, lookup) == expected

    def test_lookup_errors_propagate(self):
        def failing(term, context):
            raise LookupError(term)

        with pytest.raises(LookupError):
            text_translateAll("before [[[broken]]] after", failing)

    def test_everything_at_once(self):
        def lookup(term, context):
            if term == "some translatable bits":
                return "Sum TranSLATEable bytes"
            if term == "enuf":
                return "enough"
            if context == "context":
                return "the context"
            if context == "cousin":
                return "Cousin IT from the Adaams Family"
            return term

        text = (
            "A big long piece of text, populated with [[[some translatable bits]]], and some other\n"
            "[[[bits with %0 parameters|||3]]], as well as existing [[[%0 translatable elements|||(((enuf)))]]].\n"
            "It's worth noting that [[[it///context]]] and the other [[[it///cousin]]] are also handled."
        )
        expected = (
            "A big long piece of text, populated with Sum TranSLATEable bytes, and some other\n"
            "bits with 3 parameters, as well as existing enough translatable elements.\n"
            "It's worth noting that the context and the other Cousin IT from the Adaams Family are also handled."
        )

        assert text_translateAll(text, lookup) == expected


class TestNesting:
    """Children are resolved before their parent"""

    def test_sub_embedded_directive(self):
        original = "The quick brown fox [[[jumps [[[and leaps]]]]]] over the lazy dog."
        expected = "The quick brown fox bounces over the lazy dog."

        def lookup(term, context):
            if term == "jumps and bounds":
                return "bounces"
            if term == "and leaps":
                return "and bounds"
            return term

        assert text_translateAll(original, lookup) == expected

    def test_post_order(self):
        """The innermost lookup happens first and its result reaches the parent"""
        calls = []

        def lookup(term, context):
            calls.append(term)
            return term.upper()

        assert text_translateAll("[[[outer [[[inner]]]]]]", lookup) == "OUTER INNER"
        assert calls == ["inner", "outer INNER"]

    def test_directive_as_parameter(self):
        def lookup(term, context):
            return "rapide" if term == "quick" else term

        assert text_translateAll("[[[%0 fox|||[[[quick]]]]]]", lookup) == "rapide fox"

    def test_resolve_sees_wrapping_tokens(self):
        """substitute receives the assembled body with its own tokens"""
        seen = []

        def substitute(body):
            seen.append(body)
            return body.replace("[[[", "<").replace("]]]", ">")

        directive = directive_locate("[[[a [[[b]]] c]]]", 0)

        assert directive_resolve(directive, substitute) == "<a <b> c>"
        assert seen == ["[[[b]]]", "[[[a <b> c]]]"]

    def test_unbalanced_inner_span_kept_as_text(self):
        """Only the outer tokens are stripped from the assembled body"""
        original = "[[[a(((]]] [[[b)))]]]"

        assert directive_locate(original, 0).child_list == []
        assert text_translateAll(original, identity) == "a(((]]] [[[b)))"

    def test_substitute_make(self):
        directive = directive_locate("[[[x [[[y]]]]]]", 0)

        assert directive_resolve(directive, substitute_make(upper)) == "X Y"


class TestConcurrentCallers:
    """No state is shared between calls"""

    def test_parallel_translation(self):
        texts = [f"item [[[%0 of %1|||{i}|||(((many)))]]]" for i in range(50)]
        expected = [f"item {i} of MANY" for i in range(50)]

        def lookup(term, context):
            return term.upper() if term == "many" else term

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda text: text_translateAll(text, lookup), texts))

        assert results == expected
