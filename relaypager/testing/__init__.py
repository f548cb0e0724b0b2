""" Tools for testing """
