from face_quiz.constants.categories import Category
from face_quiz.core.models import FilterSelection
from face_quiz.ui.components.filter_panel import FilterPanel

from conftest import make_contact


def test_reloading_contacts_drops_tags_that_no_longer_exist(qt_app):
    reported = []
    panel = FilterPanel(on_filter_changed=reported.append)
    panel.set_contacts([make_contact("a", tags=("choir", "gym")), make_contact("b", tags=("gym",))])
    panel.set_selection(
        FilterSelection(categories=frozenset({Category.WORK}), tags=frozenset({"choir", "gym"}))
    )

    panel.set_contacts([make_contact("b", tags=("gym",))])

    assert panel.selection().tags == {"gym"}
    assert reported == [panel.selection()]
    panel.deleteLater()


def test_reloading_contacts_keeps_a_still_valid_selection(qt_app):
    reported = []
    panel = FilterPanel(on_filter_changed=reported.append)
    selection = FilterSelection(categories=frozenset({Category.WORK}), tags=frozenset({"gym"}))
    panel.set_selection(selection)

    panel.set_contacts([make_contact("a", tags=("gym", "choir"))])

    assert panel.selection() == selection
    assert reported == []
    panel.deleteLater()
