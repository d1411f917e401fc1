import pytest
from lxml import html
from selector_builder import CssSelectorBuilder

@pytest.fixture
def builder():
    """Return an instance of the CssSelectorBuilder class."""
    return CssSelectorBuilder()

@pytest.fixture
def html_tree():
    """Return a small parsed HTML document to evaluate XPath against."""
    return html.fromstring(
        '<html><body>'
        '<div id="main" class="container draggable">'
        '<a href="photo.png">Photo</a>'
        '<a href="notes.txt">Notes</a>'
        '</div>'
        '<table id="data">'
        '<tr><td>1</td><td>2</td></tr>'
        '<tr><td>3</td><td>4</td></tr>'
        '</table>'
        '</body></html>'
    )
