# -*- coding: utf-8 -*-
""" Global fixtures """

import os

import pytest

from py_dgschema import compile_schema


@pytest.fixture
def fixture_file():
    """ Helper to load fixture files by name. """

    def load(name):
        filepath = os.path.join(os.path.dirname(__file__), "fixtures", name)
        with open(filepath, "rb") as f:
            return f.read().decode("utf-8")

    return load


@pytest.fixture
def fixture_path():
    def path(name):
        return os.path.join(os.path.dirname(__file__), "fixtures", name)

    return path


@pytest.fixture
def people_schema(fixture_file):
    return compile_schema(fixture_file("people.graphql"))
