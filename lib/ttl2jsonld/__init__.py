""" The ttl2jsonld module converts RDF Turtle to JSON-LD. """
from .__about__ import (__copyright__, __license__, __version__)
from .convert import (
    ConversionError, convert_to_jsonld, convert_turtle, load_json_document,
    save_json_to_file, set_document_loader, get_document_loader)
from .grouper import group_triples, value_representation
from .turtle import parse_turtle

__all__ = [
    '__copyright__', '__license__', '__version__',
    'ConversionError', 'convert_to_jsonld', 'convert_turtle',
    'load_json_document', 'save_json_to_file',
    'set_document_loader', 'get_document_loader',
    'group_triples', 'value_representation', 'parse_turtle']
