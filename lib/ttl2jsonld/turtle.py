"""
Turtle parsing into RDF datasets, using rdflib.

.. module:: ttl2jsonld.turtle
  :synopsis: Turtle to RDF dataset
"""
import logging

import rdflib
from pyld.jsonld import IdentifierIssuer
from rdflib import BNode, Graph, Literal, URIRef
from rdflib.plugins.parsers.notation3 import BadSyntax

from ttl2jsonld.rdf import blank_node, iri, literal

log = logging.getLogger(__name__)


def parse_turtle(input_: str, base: str = None):
    """
    Parses RDF in the form of Turtle.

    Triples come out in the order their statements appear in the input,
    duplicates dropped. Literals keep their lexical form and blank nodes
    are relabelled '_:b0', '_:b1', ... in order of first appearance, so
    the same input always yields the same dataset.

    :param input_: the Turtle input to parse.
    :param [base]: the base IRI to resolve relative IRIs against.

    :return: an RDF dataset holding only the default graph.
    """
    graph = _OrderedGraph()
    normalize = rdflib.NORMALIZE_LITERALS
    rdflib.NORMALIZE_LITERALS = False
    try:
        graph.parse(data=input_, format='turtle', publicID=base)
    except BadSyntax as cause:
        raise ParserError(
            f'Error while parsing Turtle: {cause}',
            line_number=cause.lines + 1, cause=cause)
    except Exception as cause:
        raise ParserError(
            f'Error while parsing Turtle: {cause}', cause=cause)
    finally:
        rdflib.NORMALIZE_LITERALS = normalize

    issuer = IdentifierIssuer('_:b')
    triples = []
    for s, p, o in graph.ordered:
        triples.append({
            'subject': _to_term(s, issuer),
            'predicate': iri(str(p)),
            'object': _to_term(o, issuer)})
    log.debug('parse_turtle: %d triples, %d blank nodes',
              len(triples), issuer.counter)
    return {'@default': triples}


class _OrderedGraph(Graph):
    """
    A Graph that also records its triples in the order they were added.
    """

    def __init__(self):
        Graph.__init__(self)
        self.ordered = []

    def add(self, triple):
        if triple not in self:
            self.ordered.append(triple)
        return Graph.add(self, triple)


def _to_term(node, issuer):
    if isinstance(node, BNode):
        return blank_node(issuer.get_id(node))
    if isinstance(node, Literal):
        datatype = str(node.datatype) if node.datatype is not None else None
        return literal(str(node), datatype=datatype, language=node.language)
    if isinstance(node, URIRef):
        return iri(str(node))
    raise ParserError(f'Unsupported RDF term {node!r}.')


class ParserError(ValueError):
    """
    Raised when Turtle input cannot be parsed.
    """

    def __init__(self, message, line_number=None, cause=None):
        ValueError.__init__(self, message)
        self.line_number = line_number
        self.cause = cause
