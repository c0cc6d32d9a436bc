"""
Turtle to JSON-LD conversion pipeline.

Reads a Turtle file, converts its triples to JSON-LD, compacts the result
against a context and frames it against a frame, using PyLD for the
JSON-LD algorithms.

.. module:: ttl2jsonld.convert
  :synopsis: Turtle to JSON-LD conversion
"""
import json
import logging
import os
import sys

from pyld import jsonld

from ttl2jsonld.grouper import STRATEGIES, group_dataset
from ttl2jsonld.turtle import ParserError, parse_turtle

__all__ = [
    'convert_to_jsonld', 'convert_turtle', 'save_json_to_file',
    'load_json_document', 'set_document_loader', 'get_document_loader',
    'requests_document_loader', 'aiohttp_document_loader',
    'ConversionError', 'METHODS']

log = logging.getLogger(__name__)

# pyld.jsonld.from_rdf
JSONLD = 'jsonld'

METHODS = (JSONLD,) + STRATEGIES

# options forwarded to pyld.jsonld.frame when set
FRAME_FLAGS = ('embed', 'explicit', 'requireAll', 'omitDefault')

_default_document_loader = None


def convert_to_jsonld(ttl_file_path, context=None, frame=None, options=None):
    """
    Converts a Turtle file to JSON-LD.

    :param ttl_file_path: the path of the Turtle file.
    :param [context]: the context to compact with: a dict, a local JSON
      file path or a URL.
    :param [frame]: the frame to apply: a dict, a local JSON file path or
      a URL.
    :param [options]: the options to use.
      [compacted] True to compact against the context (default: True).
      [method] 'jsonld' for pyld.jsonld.from_rdf, or a grouping strategy:
        'basic', 'grouped', 'flat' (default: 'jsonld').
      [base] the base IRI to use.
      [useRdfType] True to use rdf:type, False to use @type
        (default: False, 'jsonld' method only).
      [useNativeTypes] True to convert XSD types into native types
        (default: False, 'jsonld' method only).
      [embed], [explicit], [requireAll], [omitDefault] framing flags.
      [documentLoader(url, options)] the document loader
        (default: _default_document_loader).

    :return: the JSON-LD output.
    """
    log.debug('convert_to_jsonld: %r, %r', ttl_file_path, options)
    try:
        with open(ttl_file_path, 'r', encoding='utf-8') as f:
            ttl_string = f.read()
    except (OSError, UnicodeDecodeError) as cause:
        raise ConversionError(
            'Could not read the Turtle input.',
            'ttl2jsonld.InputReadError', {'path': ttl_file_path},
            cause=cause)
    return convert_turtle(ttl_string, context, frame, options)


def convert_turtle(ttl_string, context=None, frame=None, options=None):
    """
    Converts a Turtle string to JSON-LD, see convert_to_jsonld.
    """
    options = options.copy() if options else {}
    options.setdefault('compacted', True)
    options.setdefault('method', JSONLD)
    options.setdefault('base', None)
    options.setdefault('useRdfType', False)
    options.setdefault('useNativeTypes', False)
    if options.get('documentLoader') is None:
        options['documentLoader'] = get_document_loader()

    method = options['method']
    if method not in METHODS:
        raise ConversionError(
            'Unknown conversion method.', 'ttl2jsonld.UnknownMethod',
            {'method': method, 'expected': list(METHODS)})

    context = load_json_document(context, options)
    frame = load_json_document(frame, options)

    try:
        dataset = parse_turtle(ttl_string, options['base'])
    except ParserError as cause:
        raise ConversionError(
            'Could not parse the Turtle input.', 'ttl2jsonld.ParseError',
            {'line': cause.line_number}, cause=cause)
    log.debug('convert_turtle: %d triples, method %s',
              len(dataset['@default']), method)

    pyld_options = {'documentLoader': options['documentLoader']}
    if options['base']:
        pyld_options['base'] = options['base']

    try:
        if method == JSONLD:
            result = jsonld.from_rdf(dataset, {
                'useRdfType': options['useRdfType'],
                'useNativeTypes': options['useNativeTypes']})
        else:
            result = group_dataset(dataset, method, context)

        if options['compacted'] and context is not None:
            result = jsonld.compact(result, context, pyld_options)

        if frame is not None:
            frame_options = dict(pyld_options)
            for flag in FRAME_FLAGS:
                if options.get(flag) is not None:
                    frame_options[flag] = options[flag]
            result = jsonld.frame(result, frame, frame_options)
    except jsonld.JsonLdError as cause:
        raise ConversionError(
            'Could not transform the JSON-LD document.',
            'ttl2jsonld.TransformError',
            {'type': cause.type, 'code': cause.code}, cause=cause)

    return result


def save_json_to_file(file_path, data, indent=2):
    """
    Writes JSON to a file, creating parent directories as needed.

    :param file_path: the output path, '-' for stdout.
    :param data: the JSON data.
    :param [indent]: the indentation (default: 2).
    """
    json_str = json.dumps(data, indent=indent, ensure_ascii=False)
    log.debug('save_json_to_file: len(output): %d', len(json_str))
    if file_path == '-':
        sys.stdout.write(json_str + '\n')
        return
    try:
        directory = os.path.dirname(file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(file_path, 'w', encoding='utf-8') as f:
            f.write(json_str)
    except OSError as cause:
        raise ConversionError(
            'Error saving JSON to file.', 'ttl2jsonld.OutputWriteError',
            {'path': file_path}, cause=cause)
    log.info('JSON-LD saved to %s', file_path)


def load_json_document(source, options=None):
    """
    Loads a context or frame document.

    :param source: a dict or list (returned as is), a local JSON file path
      or a URL retrieved with the document loader.
    :param [options]: the options to use.
      [documentLoader(url, options)] the document loader
        (default: _default_document_loader).

    :return: the JSON document, or None if source is None.
    """
    if source is None or isinstance(source, (dict, list)):
        return source
    if not isinstance(source, str):
        raise ConversionError(
            'Expected a JSON document, a file path or a URL.',
            'ttl2jsonld.LoadDocumentError', {'source': repr(source)})

    if os.path.exists(source):
        try:
            with open(source, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, ValueError) as cause:
            raise ConversionError(
                'Could not read a JSON document from the file.',
                'ttl2jsonld.LoadDocumentError', {'path': source},
                cause=cause)

    options = options or {}
    loader = options.get('documentLoader') or get_document_loader()
    remote_doc = loader(source)
    document = remote_doc.get('document')
    if document is None:
        raise ConversionError(
            'No remote document found at the given URL.',
            'ttl2jsonld.LoadDocumentError', {'url': source})
    if isinstance(document, str):
        try:
            document = json.loads(document)
        except ValueError as cause:
            raise ConversionError(
                'The remote document is not JSON.',
                'ttl2jsonld.LoadDocumentError',
                {'url': source, 'contentType': remote_doc.get('contentType')},
                cause=cause)
    log.debug('load_json_document: %s (%s)', source,
              remote_doc.get('contentType'))
    return document


def set_document_loader(load_document):
    """
    Sets the default document loader.

    :param load_document(url, options): the document loader to use.
    """
    global _default_document_loader
    _default_document_loader = load_document


def get_document_loader():
    """
    Gets the default document loader, creating a Requests loader on first
    use.

    :return: the default document loader.
    """
    global _default_document_loader
    if _default_document_loader is None:
        _default_document_loader = requests_document_loader()
    return _default_document_loader


def requests_document_loader(**kwargs):
    import ttl2jsonld.documentloader.requests

    return ttl2jsonld.documentloader.requests.requests_document_loader(
        **kwargs)


def aiohttp_document_loader(**kwargs):
    import ttl2jsonld.documentloader.aiohttp

    return ttl2jsonld.documentloader.aiohttp.aiohttp_document_loader(**kwargs)


class ConversionError(Exception):
    """
    Raised when a conversion stage fails; 'type' names the stage.
    """

    def __init__(self, message, type_, details=None, cause=None):
        Exception.__init__(self, message)
        self.message = message
        self.type = type_
        self.details = details
        self.cause = cause

    def __str__(self):
        rval = self.message
        rval += '\nType: ' + self.type
        if self.details:
            rval += '\nDetails: ' + repr(self.details)
        if self.cause:
            rval += '\nCause: ' + str(self.cause)
        return rval
