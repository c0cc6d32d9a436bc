""" Remote document loaders for contexts and frames. """
