"""
Groups RDF triples by subject into a JSON-LD shaped document.

This is the lightweight alternative to ``pyld.jsonld.from_rdf``: no list
conversion, no ``@type`` folding, no sorting. Subjects and predicates keep
the order in which they are first seen.

.. module:: ttl2jsonld.grouper
  :synopsis: Triple to JSON-LD grouping
"""

from ttl2jsonld.rdf import (
    BLANK_NODE, IRI, RDF_LANGSTRING, XSD_STRING, node_id)

__all__ = [
    'BASIC', 'GROUPED', 'FLAT', 'STRATEGIES',
    'group_triples', 'group_dataset', 'value_representation']

# single values bare, repeated values as a list
BASIC = 'basic'
# every value in a list (expanded node object shape)
GROUPED = 'grouped'
# one node object per triple, nothing folded
FLAT = 'flat'

STRATEGIES = (BASIC, GROUPED, FLAT)


class Single(object):
    __slots__ = ['value']

    def __init__(self, value):
        self.value = value

    def add(self, value):
        return Multiple([self.value, value])

    def to_json(self, always_list=False):
        return [self.value] if always_list else self.value


class Multiple(object):
    __slots__ = ['values']

    def __init__(self, values):
        self.values = values

    def add(self, value):
        self.values.append(value)
        return self

    def to_json(self, always_list=False):
        return list(self.values)


def value_representation(object_):
    """
    Converts an RDF triple object to a JSON-LD value or node reference.

    xsd:string is never written as @type; neither is rdf:langString when a
    language tag is present. A literal with both a language tag and some
    other datatype gets both keys.

    :param object_: the RDF triple object to convert.

    :return: the JSON-LD object.
    """
    if object_['type'] in (IRI, BLANK_NODE):
        return {'@id': node_id(object_)}

    rval = {'@value': object_['value']}
    datatype = object_.get('datatype')
    language = object_.get('language')
    if datatype and datatype != XSD_STRING and not (
            language and datatype == RDF_LANGSTRING):
        rval['@type'] = datatype
    if language:
        rval['@language'] = language
    return rval


def group_triples(triples, strategy=BASIC, context=None):
    """
    Groups triples by subject.

    :param triples: the triples to group, in order.
    :param [strategy]: 'basic', 'grouped' or 'flat' (default: 'basic').
    :param [context]: a context passed through as @context, either a
      context object or a document with an @context key.

    :return: the JSON-LD document ({'@context': ..., '@graph': [...]}).
    """
    if strategy == FLAT:
        graph = _flat(triples)
    elif strategy in (BASIC, GROUPED):
        nodes = _group(triples)
        always_list = strategy == GROUPED
        graph = []
        for subject, properties in nodes.items():
            node = {'@id': subject}
            for predicate, entry in properties.items():
                node[predicate] = entry.to_json(always_list)
            graph.append(node)
    else:
        raise ValueError(
            'Unknown grouping strategy %r; expected one of %s.' % (
                strategy, ', '.join(STRATEGIES)))

    rval = {}
    if context is not None:
        if isinstance(context, dict) and '@context' in context:
            context = context['@context']
        rval['@context'] = context
    rval['@graph'] = graph
    return rval


def group_dataset(dataset, strategy=BASIC, context=None):
    """
    Groups the default graph of an RDF dataset, see group_triples.
    """
    return group_triples(dataset.get('@default', []), strategy, context)


def _group(triples):
    nodes = {}
    for triple in triples:
        properties = nodes.setdefault(node_id(triple['subject']), {})
        predicate = triple['predicate']['value']
        value = value_representation(triple['object'])
        entry = properties.get(predicate)
        if entry is None:
            properties[predicate] = Single(value)
        else:
            properties[predicate] = entry.add(value)
    return nodes


def _flat(triples):
    graph = []
    for triple in triples:
        graph.append({
            '@id': node_id(triple['subject']),
            triple['predicate']['value']:
                value_representation(triple['object'])})
    return graph
