import json
import os
import subprocess
import sys

import pytest

from ttl2jsonld.grouper import group_dataset
from ttl2jsonld.rdf import RDF_LANGSTRING, RDF_TYPE, XSD, XSD_STRING
from ttl2jsonld.turtle import ParserError, parse_turtle

EX = 'http://example.org/'
FOAF = 'http://xmlns.com/foaf/0.1/'
LIB_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', 'lib')


def read(path):
    with open(path, encoding='utf-8') as f:
        return f.read()


def triples(path):
    return parse_turtle(read(path))['@default']


def find(triples, subject=None, predicate=None):
    return [
        t for t in triples
        if (subject is None or t['subject']['value'] == subject) and
        (predicate is None or t['predicate']['value'] == predicate)]


def group_in_subprocess(path, hash_seed):
    """
    Groups a Turtle file in a fresh interpreter with the given hash seed.
    """
    code = (
        'import json, sys\n'
        'from ttl2jsonld.grouper import group_dataset\n'
        'from ttl2jsonld.turtle import parse_turtle\n'
        'with open(sys.argv[1], encoding="utf-8") as f:\n'
        '    print(json.dumps(group_dataset(parse_turtle(f.read()))))\n')
    env = dict(os.environ)
    env['PYTHONHASHSEED'] = str(hash_seed)
    env['PYTHONPATH'] = os.pathsep.join(
        [LIB_DIR] + [p for p in [env.get('PYTHONPATH')] if p])
    output = subprocess.check_output(
        [sys.executable, '-c', code, path], env=env)
    return json.loads(output.decode('utf-8'))


class TestParseTurtle:
    def test_default_graph_only(self, data_path):
        dataset = parse_turtle(read(data_path('people.ttl')))
        assert list(dataset) == ['@default']
        assert len(dataset['@default']) == 9

    def test_iri_object(self, data_path):
        knows = find(triples(data_path('people.ttl')), EX + 'Alice',
                     FOAF + 'knows')
        assert [t['object']['value'] for t in knows] == [
            EX + 'Bob', EX + 'Carol']
        assert all(t['object']['type'] == 'IRI' for t in knows)

    def test_rdf_type(self, data_path):
        [type_] = find(triples(data_path('people.ttl')), EX + 'Bob', RDF_TYPE)
        assert type_['object'] == {'type': 'IRI', 'value': FOAF + 'Person'}

    def test_literals(self, data_path):
        triples_ = triples(data_path('people.ttl'))
        [name] = find(triples_, EX + 'Alice', FOAF + 'name')
        assert name['object'] == {
            'type': 'literal', 'value': 'Alice', 'datatype': XSD_STRING}
        [age] = find(triples_, EX + 'Alice', FOAF + 'age')
        assert age['object'] == {
            'type': 'literal', 'value': '42', 'datatype': XSD + 'integer'}
        [plain] = find(triples_, EX + 'Bob', FOAF + 'name')
        assert plain['object']['datatype'] == XSD_STRING

    def test_lexical_forms_kept(self):
        dataset = parse_turtle(
            '@prefix ex: <http://example.org/> .\n'
            '@prefix xsd: <http://www.w3.org/2001/XMLSchema#> .\n'
            'ex:s ex:p "01"^^xsd:integer, "1.50"^^xsd:decimal, '
            '"+7"^^xsd:int, 1.0e0 .\n')
        values = sorted(t['object']['value'] for t in dataset['@default'])
        assert values == ['+7', '01', '1.0e0', '1.50']

    def test_literal_normalization_restored(self):
        import rdflib

        before = rdflib.NORMALIZE_LITERALS
        parse_turtle('<http://example.org/s> <http://example.org/p> 1 .')
        assert rdflib.NORMALIZE_LITERALS == before
        with pytest.raises(ParserError):
            parse_turtle('<http://example.org/s> <http://example.org/p> .')
        assert rdflib.NORMALIZE_LITERALS == before

    def test_language_literal(self, data_path):
        [name] = find(triples(data_path('people.ttl')), '_:b0', FOAF + 'name')
        assert name['object'] == {
            'type': 'literal', 'value': 'Leiden',
            'datatype': RDF_LANGSTRING, 'language': 'nl'}

    def test_blank_nodes_relabelled(self, data_path):
        triples_ = triples(data_path('people.ttl'))
        [near] = find(triples_, EX + 'Alice', FOAF + 'based_near')
        assert near['object'] == {'type': 'blank node', 'value': '_:b0'}
        assert find(triples_, '_:b0')[0]['subject']['type'] == 'blank node'

    def test_blank_node_labels_follow_first_appearance(self):
        dataset = parse_turtle(
            '@prefix ex: <http://example.org/> .\n'
            '_:x ex:p _:y .\n'
            '_:z ex:p _:x .\n')
        assert [(t['subject']['value'], t['object']['value'])
                for t in dataset['@default']] == [
            ('_:b0', '_:b1'), ('_:b2', '_:b0')]

    def test_statement_order(self):
        dataset = parse_turtle(
            '@prefix ex: <http://example.org/> .\n'
            'ex:c ex:p ex:z .\n'
            'ex:a ex:q ex:y .\n'
            'ex:b ex:p ex:x .\n'
            'ex:a ex:p ex:w .\n')
        assert [(t['subject']['value'], t['object']['value'])
                for t in dataset['@default']] == [
            (EX + 'c', EX + 'z'), (EX + 'a', EX + 'y'),
            (EX + 'b', EX + 'x'), (EX + 'a', EX + 'w')]

    def test_file_order(self, data_path):
        graph = group_dataset(parse_turtle(read(data_path('people.ttl'))))
        nodes = graph['@graph']
        assert [n['@id'] for n in nodes] == [EX + 'Alice', '_:b0', EX + 'Bob']
        assert list(nodes[0]) == [
            '@id', RDF_TYPE, FOAF + 'name', FOAF + 'age', FOAF + 'knows',
            FOAF + 'based_near']
        assert nodes[0][FOAF + 'knows'] == [
            {'@id': EX + 'Bob'}, {'@id': EX + 'Carol'}]

    def test_same_output_across_hash_seeds(self, data_path):
        path = data_path('people.ttl')
        expected = group_dataset(parse_turtle(read(path)))
        for hash_seed in (1, 2, 3):
            assert group_in_subprocess(path, hash_seed) == expected

    def test_duplicate_triples_collapse(self):
        dataset = parse_turtle(
            '<http://example.org/s> <http://example.org/p> "o" .\n'
            '<http://example.org/s> <http://example.org/p> "o" .\n')
        assert len(dataset['@default']) == 1

    def test_base(self):
        dataset = parse_turtle('<alice> <knows> <bob> .', base=EX)
        [triple] = dataset['@default']
        assert triple['subject']['value'] == EX + 'alice'
        assert triple['object']['value'] == EX + 'bob'

    def test_syntax_error(self, data_path):
        with pytest.raises(ParserError) as excinfo:
            parse_turtle(read(data_path('broken.ttl')))
        assert isinstance(excinfo.value, ValueError)
        assert excinfo.value.cause is not None
        assert excinfo.value.line_number is not None
