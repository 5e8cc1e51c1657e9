import pytest

from cssbuild.selectors import (
    CombinedSelector,
    DuplicateSingletonError,
    OrderViolationError,
    SelectorDraft,
    SelectorError,
    css_selector_builder,
)

builder = css_selector_builder


def test_id_and_classes():
    selector = builder.id("main").class_("container").class_("editable")
    assert selector.stringify() == "#main.container.editable"


def test_element_attr_pseudo_class():
    selector = builder.element("a").attr('href$=".png"').pseudo_class("focus")
    assert selector.stringify() == 'a[href$=".png"]:focus'


def test_all_fragments_in_grammar_order():
    selector = (
        builder.element("input")
        .id("name")
        .class_("field")
        .class_("wide")
        .attr("type=text")
        .pseudo_class("focus")
        .pseudo_class("valid")
        .pseudo_element("placeholder")
    )
    assert selector.stringify() == "input#name.field.wide[type=text]:focus:valid::placeholder"


def test_stringify_is_repeatable():
    selector = builder.element("li").class_("item").pseudo_class("first-child")
    assert selector.stringify() == selector.stringify() == "li.item:first-child"
    assert str(selector) == "li.item:first-child"


def test_each_facade_call_starts_independent_chain():
    first = builder.element("a")
    second = builder.id("b")
    assert first is not second
    assert first.stringify() == "a"
    assert second.stringify() == "#b"
    assert builder.stringify() == ""


def test_draft_methods_return_same_instance():
    draft = builder.element("div")
    assert draft.class_("box") is draft
    assert draft.stage == 3


def test_class_keyword_alias():
    selector = getattr(builder, "class")("container")
    selector = getattr(selector, "class")("editable")
    assert selector.stringify() == ".container.editable"


def test_attr_second_call_replaces_first():
    selector = builder.element("a").attr("href").attr("title")
    assert selector.stringify() == "a[title]"


@pytest.mark.parametrize(
    "build",
    [
        lambda: builder.element("div").id("main").element("div"),
        lambda: builder.element("div").element("span"),
        lambda: builder.id("a").id("b"),
        lambda: builder.id("a").class_("c").id("b"),
        lambda: builder.pseudo_element("after").pseudo_element("before"),
    ],
)
def test_duplicate_singletons(build):
    with pytest.raises(DuplicateSingletonError, match="more then one time"):
        build()


@pytest.mark.parametrize(
    "build",
    [
        lambda: builder.id("main").element("div"),
        lambda: builder.class_("c").element("div"),
        lambda: builder.class_("c").id("main"),
        lambda: builder.attr("href").id("main"),
        lambda: builder.pseudo_class("hover").id("main"),
        lambda: builder.pseudo_element("after").id("main"),
        lambda: builder.attr("href").class_("c"),
        lambda: builder.pseudo_class("hover").class_("c"),
        lambda: builder.pseudo_class("hover").attr("href"),
        lambda: builder.pseudo_element("after").attr("href"),
        lambda: builder.pseudo_element("after").pseudo_class("hover"),
    ],
)
def test_order_violations(build):
    with pytest.raises(OrderViolationError, match="arranged in the following order"):
        build()


def test_duplicate_checked_before_order():
    draft = builder.element("a").pseudo_class("hover")
    with pytest.raises(DuplicateSingletonError):
        draft.element("b")


def test_pseudo_element_ignores_stage():
    selector = builder.element("p").pseudo_class("hover").pseudo_element("after")
    assert selector.stringify() == "p:hover::after"


def test_errors_share_base_class():
    assert issubclass(DuplicateSingletonError, SelectorError)
    assert issubclass(OrderViolationError, ValueError)


def test_combine_joins_with_spaces():
    left = builder.element("p").class_("lead")
    right = builder.element("span")
    combined = builder.combine(left, "+", right)
    assert isinstance(combined, CombinedSelector)
    assert combined.stringify() == left.stringify() + " + " + right.stringify()


def test_combine_nested():
    selector = builder.combine(
        builder.element("div").id("main").class_("container").class_("draggable"),
        "+",
        builder.combine(
            builder.element("table").id("data"),
            "~",
            builder.combine(
                builder.element("tr").pseudo_class("nth-of-type(even)"),
                " ",
                builder.element("td").pseudo_class("nth-of-type(even)"),
            ),
        ),
    )
    assert selector.stringify() == (
        "div#main.container.draggable + table#data ~ "
        "tr:nth-of-type(even)   td:nth-of-type(even)"
    )


def test_combine_does_not_touch_operands():
    left = builder.element("ul")
    right = builder.element("li")
    builder.combine(left, ">", right)
    assert left.stage == 1
    assert right.stringify() == "li"
    # operands are still open for more fragments
    left.class_("menu")
    assert left.stringify() == "ul.menu"


def test_empty_draft_renders_empty_string():
    assert SelectorDraft().stringify() == ""
