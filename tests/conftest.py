import pytest
import structlog

from xpathcat.engine.base import (
    DocumentTree,
    NodeCollectionResult,
    NodeKind,
    NodeRef,
    QueryContext,
    QueryEngine,
)
from xpathcat.sources.reader import ByteSource, DocumentBuffer
from xpathcat.utils.exceptions import (
    ContextError,
    DocumentParseError,
    EvaluationError,
    InputReadError,
)


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def simple_xml():
    return b"<root><child1>one</child1><child2>hello  </child2></root>"


@pytest.fixture
def namespaced_xml():
    return b'<?xml version="1.0"?>\n<catalog xmlns="urn:example:catalog"><item>  first </item><item>second</item></catalog>'


@pytest.fixture
def broken_xml():
    return b"<root><child2>hello</root>"


@pytest.fixture
def write_xml(tmp_path):
    def _write(name, content):
        path = tmp_path / name
        path.write_bytes(content)
        return str(path)

    return _write


# ---------------------------------------------------------------------------
# In-memory collaborators
# ---------------------------------------------------------------------------


class MemorySource(ByteSource):
    """Byte source serving documents from a dict, remembering every buffer."""

    def __init__(self, documents):
        super().__init__()
        self.documents = documents
        self.buffers = []

    def read(self, input_ref):
        if input_ref not in self.documents:
            raise InputReadError(input_ref, f"Couldn't open input file {input_ref}")
        buffer = DocumentBuffer(input_ref, bytearray(self.documents[input_ref]))
        self.buffers.append(buffer)
        return buffer


class FakeTree(DocumentTree):
    def __init__(self, label, texts=None, events=None):
        super().__init__(label)
        self.texts = texts or {}
        self.events = events if events is not None else []

    def children_text(self, node):
        return self.texts.get(node.name)

    def close(self):
        self.events.append("tree_closed")
        super().close()


class FakeContext(QueryContext):
    def __init__(self, tree, events):
        super().__init__(tree)
        self.events = events

    def close(self):
        self.events.append("context_closed")
        super().close()


class FakeEngine(QueryEngine):
    """Engine returning a canned result, optionally failing at one stage."""

    def __init__(self, result=None, fail_at=None, texts=None):
        self.result = result if result is not None else NodeCollectionResult(nodes=None)
        self.fail_at = fail_at
        self.texts = texts or {}
        self.events = []
        self.parsed = []

    def parse(self, data, length, label):
        self.parsed.append(bytes(data[:length]))
        if self.fail_at == "parse":
            raise DocumentParseError(label, "Document not parsed successfully")
        self.events.append("parsed")
        return FakeTree(label, self.texts, self.events)

    def new_context(self, tree):
        if self.fail_at == "context":
            raise ContextError(tree.label, "Can't create XPath context")
        self.events.append("context_created")
        return FakeContext(tree, self.events)

    def evaluate(self, context, expression):
        if self.fail_at == "evaluate":
            raise EvaluationError(context.tree.label, expression, "XPath expression invalid")
        self.events.append("evaluated")
        return self.result


@pytest.fixture
def element_result():
    return NodeCollectionResult(
        nodes=[
            NodeRef(kind=NodeKind.ELEMENT, name="child2", handle=object()),
            NodeRef(kind=NodeKind.TEXT, content="  loose text\n", handle=object()),
            NodeRef(kind=NodeKind.OTHER, handle=object()),
        ]
    )


@pytest.fixture
def fake_tree():
    return FakeTree("doc.xml", texts={"child2": " hello  ", "child1": "one"})


@pytest.fixture
def make_engine():
    return FakeEngine


@pytest.fixture
def make_source():
    return MemorySource
