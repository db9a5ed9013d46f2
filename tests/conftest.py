"""Shared fixtures for the Rollem test suite.

ScriptedRandom stands in for random.Random: it hands back the queued faces in
order, so tests can pin exact totals and critical flags.
"""

import pytest


class ScriptedRandom:
    def __init__(self, faces=()):
        self.faces = list(faces)
        self.calls = []

    def queue(self, *faces):
        self.faces.extend(faces)

    def randint(self, a, b):
        self.calls.append((a, b))
        face = self.faces.pop(0)
        assert a <= face <= b, f"scripted face {face} outside [{a}, {b}]"
        return face


@pytest.fixture
def scripted():
    return ScriptedRandom()
