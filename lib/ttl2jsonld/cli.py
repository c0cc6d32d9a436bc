#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
ttl2jsonld - CLI script converting Turtle files to JSON-LD
"""
import argparse
import logging
import sys

import ttl2jsonld.convert as convert

log = logging.getLogger()

DEFAULT_INPUT = 'run.ttl'
DEFAULT_OUTPUT = 'output/result.json'

LOADERS = {
    'requests': convert.requests_document_loader,
    'aiohttp': convert.aiohttp_document_loader,
}


def build_parser():
    prs = argparse.ArgumentParser(
        prog='ttl2jsonld',
        description='Convert an RDF Turtle file to JSON-LD')

    prs.add_argument('input',
                     help='Turtle file to convert [default: %s]' %
                     DEFAULT_INPUT,
                     nargs='?',
                     default=DEFAULT_INPUT)
    prs.add_argument('-o', '--output',
                     help=('File to write the JSON-LD to, - for stdout '
                           '[default: %s]' % DEFAULT_OUTPUT),
                     dest='output',
                     default=DEFAULT_OUTPUT)

    prs.add_argument('--context',
                     help='@context file or URL to compact with',
                     dest='context',
                     action='store')
    prs.add_argument('--frame',
                     help='Frame file or URL to frame with',
                     dest='frame',
                     action='store')
    prs.add_argument('--no-compact',
                     help='Don\'t compact with the context',
                     dest='compacted',
                     action='store_false',
                     default=True)
    prs.add_argument('--method',
                     help=('Conversion method: jsonld (pyld from_rdf), or '
                           'the basic, grouped or flat triple grouping '
                           '[default: jsonld]'),
                     dest='method',
                     choices=convert.METHODS,
                     default=convert.JSONLD)

    prs.add_argument('--base',
                     help='Base IRI to use',
                     dest='base',
                     action='store')
    prs.add_argument('--rdf-type',
                     help='Use rdf:type instead of @type',
                     dest='useRdfType',
                     action='store_true')
    prs.add_argument('--native-types',
                     help='Convert XSD types into native types',
                     dest='useNativeTypes',
                     action='store_true')
    prs.add_argument('--indent',
                     help='Indent json with n spaces [default: 2]',
                     dest='indent',
                     type=int,
                     default=2)

    prs.add_argument('--embed',
                     help='default @embed flag for framing',
                     dest='embed',
                     action='store')
    prs.add_argument('--explicit',
                     help='default @explicit flag for framing',
                     dest='explicit',
                     action='store_true',
                     default=None)
    prs.add_argument('--require-all',
                     help='default @requireAll flag for framing',
                     dest='requireAll',
                     action='store_true',
                     default=None)
    prs.add_argument('--omit-default',
                     help='default @omitDefault flag for framing',
                     dest='omitDefault',
                     action='store_true',
                     default=None)

    prs.add_argument('--loader',
                     help=('Remote document loader: requests, aiohttp '
                           '[default: requests]'),
                     dest='loader',
                     choices=sorted(LOADERS),
                     default='requests')
    prs.add_argument('--secure',
                     help='Only fetch contexts and frames over https',
                     dest='secure',
                     action='store_true')
    prs.add_argument('--timeout',
                     help='Timeout in seconds for remote documents',
                     dest='timeout',
                     type=float)

    prs.add_argument('-v', '--verbose',
                     dest='verbose',
                     action='store_true',)
    prs.add_argument('-q', '--quiet',
                     dest='quiet',
                     action='store_true',)
    return prs


def main(*argv):
    prs = build_parser()
    if not argv:
        _argv = sys.argv[1:]
    else:
        _argv = list(argv)
    opts = prs.parse_args(args=_argv)

    if not opts.quiet:
        logging.basicConfig(format='%(levelname)s %(name)s: %(message)s')
        logging.getLogger().setLevel(
            logging.DEBUG if opts.verbose else logging.INFO)

    loader_kwargs = {'secure': opts.secure}
    if opts.timeout is not None:
        loader_kwargs['timeout'] = opts.timeout
    options = {
        'compacted': opts.compacted,
        'method': opts.method,
        'base': opts.base,
        'useRdfType': opts.useRdfType,
        'useNativeTypes': opts.useNativeTypes,
        'embed': opts.embed,
        'explicit': opts.explicit,
        'requireAll': opts.requireAll,
        'omitDefault': opts.omitDefault,
        'documentLoader': LOADERS[opts.loader](**loader_kwargs),
    }

    try:
        result = convert.convert_to_jsonld(
            opts.input, opts.context, opts.frame, options)
        convert.save_json_to_file(opts.output, result, indent=opts.indent)
    except convert.ConversionError as e:
        log.error('Error: %s', e.message)
        log.debug('main: %s', e)
        return 1

    if opts.output != '-':
        log.info('Result written to %s', opts.output)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:]))
