"""
RDF terms and triples in the dict form used by PyLD datasets.

A triple is ``{'subject': term, 'predicate': term, 'object': term}`` where
a term is ``{'type': 'IRI' | 'blank node' | 'literal', 'value': str}``.
Literals also carry a ``datatype`` and, when language-tagged, a
``language``.

.. module:: ttl2jsonld.rdf
  :synopsis: RDF triple data model
"""

XSD = 'http://www.w3.org/2001/XMLSchema#'
XSD_STRING = XSD + 'string'
RDF = 'http://www.w3.org/1999/02/22-rdf-syntax-ns#'
RDF_LANGSTRING = RDF + 'langString'
RDF_TYPE = RDF + 'type'

IRI = 'IRI'
BLANK_NODE = 'blank node'
LITERAL = 'literal'

BNODE_PREFIX = '_:'


def iri(value: str):
    return {'type': IRI, 'value': value}


def blank_node(label: str):
    """
    Creates a blank node term.

    :param label: the blank node label, with or without the '_:' prefix.

    :return: the blank node term.
    """
    if not label.startswith(BNODE_PREFIX):
        label = BNODE_PREFIX + label
    return {'type': BLANK_NODE, 'value': label}


def literal(value: str, datatype: str = None, language: str = None):
    """
    Creates a literal term.

    A language-tagged literal gets rdf:langString as datatype unless one
    is given explicitly; an untyped literal gets xsd:string.

    :param value: the lexical value.
    :param [datatype]: the datatype IRI.
    :param [language]: the language tag.

    :return: the literal term.
    """
    rval = {'type': LITERAL, 'value': value}
    if language is not None:
        rval['datatype'] = datatype or RDF_LANGSTRING
        rval['language'] = language
    else:
        rval['datatype'] = datatype or XSD_STRING
    return rval


def term(value: str):
    """
    Creates an IRI or a blank node term from a string, blank nodes being
    recognised by their '_:' prefix.
    """
    if value.startswith(BNODE_PREFIX):
        return blank_node(value)
    return iri(value)


def triple(subject, predicate, object_):
    """
    Creates a triple. Subject and predicate may be given as strings, the
    object may be a string (IRI or blank node) or a term.
    """
    if isinstance(subject, str):
        subject = term(subject)
    if isinstance(predicate, str):
        predicate = iri(predicate)
    if isinstance(object_, str):
        object_ = term(object_)
    return {'subject': subject, 'predicate': predicate, 'object': object_}


def node_id(term_):
    """
    Returns the JSON-LD node identifier for an IRI or blank node term.
    """
    if term_['type'] == BLANK_NODE and \
            not term_['value'].startswith(BNODE_PREFIX):
        return BNODE_PREFIX + term_['value']
    return term_['value']
