import logging
import time

from flask import Flask, Response, abort, g, request
from frozendict import frozendict

from dstructs.gui.html.chain import chain_html, chain_page_html
from dstructs.linkedlist import LinkedList

# After the subpackage import, which binds dstructs.gui.html over this name
import html  # noqa: E402

logger = logging.getLogger(__name__)

app = Flask(__name__)

ELEMENT_SIZE = 4
DEMO_LISTS = frozendict(
    {
        "tens": (10, 20, 30),
        "negatives": (-1, -2, -3, -4),
        "empty": (),
    }
)
app.config.from_object(__name__)

lists: dict[str, LinkedList[int]] = {}


def load_demo_lists() -> None:
    """(Re)build every demo list from the app config"""
    for old in lists.values():
        old.destroy()
    lists.clear()

    for name, elements in app.config["DEMO_LISTS"].items():
        lst = LinkedList[int](app.config["ELEMENT_SIZE"])
        for element in elements:
            lst.add_last(element)
        lists[name] = lst


load_demo_lists()


def get_list(name: str) -> LinkedList[int]:
    if name not in lists:
        abort(404)
    return lists[name]


@app.before_request
def start_timer():
    g.start = time.time()


@app.after_request
def log_timing(response: Response) -> Response:
    logger.debug(
        "%s %s took %.2Es",
        request.method,
        request.path,
        time.time() - g.start,
    )
    return response


@app.route("/")
def root() -> str:
    links = "".join(
        f'<page-link><a href="/{html.escape(name)}">{html.escape(name)}'
        f" ({len(lst)})</a></page-link>"
        for name, lst in lists.items()
    )
    return f"""
    <!doctype html>
    <html>
        <body>
            <page-links>{links}</page-links>
        </body>
    </html>
    """


@app.route("/<name>")
def chain_page(name: str) -> str:
    return chain_page_html(name, get_list(name))


@app.route("/<name>/nodes/<int:index>", methods=["PUT"])
def add_node(name: str, index: int) -> str:
    lst = get_list(name)
    try:
        element = int(request.form["element"])
    except (KeyError, ValueError):
        abort(400)

    if not lst.add(index, element):
        abort(400)

    return chain_html(name, lst)


@app.route("/<name>/nodes/<int:index>", methods=["DELETE"])
def remove_node(name: str, index: int) -> str:
    lst = get_list(name)
    if index >= lst.size():
        abort(404)

    lst.remove(index)
    return chain_html(name, lst)
