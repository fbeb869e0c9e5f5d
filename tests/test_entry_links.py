"""Tests for canonical links, source links and display names."""

import pytest

from docembed.display_name import display_name, embed_name, entry_link, formatted_type
from docembed.doc_entry import DocEntry
from docembed.doc_graph import DocGraph
from docembed.doc_type import DocType, Scope
from docembed.entry_links import canonical_link, is_static, source_link
from docembed.load_docs import build_graph
from docembed.type_target import resolve_type_target

from tests.sample_docs import DOCS_URL, REPO_URL


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        (("Client",), "/class/Client"),
        (("Client", "user"), "/class/Client?scrollTo=user"),
        (("Client", "instances"), "/class/Client?scrollTo=s-instances"),
        (("Client", "ready"), "/class/Client?scrollTo=ready"),
        (("Client", "login()"), "/class/Client?scrollTo=login"),
        (("ClientOptions",), "/typedef/ClientOptions"),
        (("ClientOptions", "shards"), "/typedef/ClientOptions?scrollTo=shards"),
    ],
)
def test_canonical_link_scroll_to(
    graph: DocGraph, path: tuple[str, ...], expected: str
) -> None:
    """Verify the <kind>/<Parent>?scrollTo=<name> convention."""
    entry = graph.get(*path)
    assert entry is not None
    assert canonical_link(entry, graph) == DOCS_URL + expected


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        (("Client",), "/Client"),
        (("Client", "user"), "/Client#user"),
        (("Client", "instances"), "/Client#.instances"),
        (("Client", "ready"), "/Client#event:ready"),
        (("Client", "login()"), "/Client#login"),
        (("ClientOptions",), "/global#ClientOptions"),
        (("ClientOptions", "shards"), "/global#ClientOptions"),
    ],
)
def test_canonical_link_fragment(
    fragment_graph: DocGraph, path: tuple[str, ...], expected: str
) -> None:
    """Verify the <Parent>#<name> convention with global typedefs."""
    entry = fragment_graph.get(*path)
    assert entry is not None
    assert canonical_link(entry, fragment_graph) == DOCS_URL + expected


def test_canonical_link_requires_base_url(bare_graph: DocGraph) -> None:
    """Verify that no link is produced without a configured base URL."""
    client = bare_graph.get("Client")
    assert client is not None
    assert canonical_link(client, bare_graph) is None
    assert entry_link(client, bare_graph) == "Client"


def test_params_and_constructors_have_no_link(graph: DocGraph) -> None:
    """Verify that params and constructors never get a canonical link."""
    client = graph.get("Client")
    assert client is not None and client.construct is not None
    assert canonical_link(client.construct, graph) is None
    assert client.construct.params is not None
    assert canonical_link(client.construct.params[0], graph) is None


def test_source_link(graph: DocGraph, bare_graph: DocGraph) -> None:
    """Verify source links need both a repo URL and source metadata."""
    client = graph.get("Client")
    assert client is not None
    assert source_link(client, graph) == f"{REPO_URL}/src/client/Client.js#L12"

    user = graph.get("ClientUser")
    assert user is not None
    assert source_link(user, graph) is None  # no meta

    bare_client = bare_graph.get("Client")
    assert bare_client is not None
    assert source_link(bare_client, bare_graph) is None  # no repo URL


def test_static_property_display_name() -> None:
    """Verify a static property renders as Container.name."""
    graph = build_graph(
        {
            "classes": [
                {
                    "name": "Foo",
                    "props": [{"name": "bar", "scope": "static", "type": [["x"]]}],
                },
            ],
        },
    )
    bar = graph.get("Foo", "bar")
    assert bar is not None
    assert is_static(bar)
    assert display_name(bar, graph) == "Foo.bar"


def test_display_names(graph: DocGraph) -> None:
    """Verify display names of each variant."""
    names = {
        ("Client",): "Client",
        ("Client", "user"): "Client#user",
        ("Client", "instances"): "Client.instances",
        ("Client", "ready"): "Client#event:ready",
        ("Client", "login()"): "Client#login()",
    }
    for path, expected in names.items():
        entry = graph.get(*path)
        assert entry is not None
        assert display_name(entry, graph) == expected


def test_param_display_name() -> None:
    """Verify optional and deprecated params are marked."""
    graph = DocGraph()
    plain = DocEntry(doc_type=DocType.PARAM, name="a")
    optional = DocEntry(doc_type=DocType.PARAM, name="b", optional=True)
    both = DocEntry(doc_type=DocType.PARAM, name="c", optional=True, deprecated=True)
    assert display_name(plain, graph) == "`a`"
    assert display_name(optional, graph) == "`[b]`"
    assert display_name(both, graph) == "~~`[c]`~~"


def test_embed_name_for_props(graph: DocGraph) -> None:
    """Verify property row headers use code spans."""
    shards = graph.get("ClientOptions", "shards")
    assert shards is not None
    assert embed_name(shards) == "`[shards]`"


def test_is_static() -> None:
    """Verify static-ness follows the scope only."""
    assert is_static(DocEntry(doc_type=DocType.PROP, name="a", scope=Scope.STATIC))
    assert not is_static(
        DocEntry(doc_type=DocType.PROP, name="a", scope=Scope.INSTANCE)
    )
    assert not is_static(DocEntry(doc_type=DocType.PROP, name="a"))


def test_formatted_type_nullable(graph: DocGraph) -> None:
    """Verify nullable types get a leading question mark and links."""
    user = graph.get("Client", "user")
    assert user is not None
    assert (
        formatted_type(user, graph) == f"?**[ClientUser]({DOCS_URL}/class/ClientUser)**"
    )


def test_resolve_type_target(graph: DocGraph) -> None:
    """Verify the first documented identifier in a type is resolved."""
    user = graph.get("Client", "user")
    instances = graph.get("Client", "instances")
    assert user is not None and instances is not None
    target = resolve_type_target(user, graph)
    assert target is not None
    assert target.name == "ClientUser"
    assert resolve_type_target(instances, graph) is None
