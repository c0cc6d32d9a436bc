# -*- coding: utf-8 -*-
__copyright__ = 'Copyright (c) the ttl2jsonld authors'
__license__ = 'BSD 3-Clause license'
__version__ = '0.3.0'
