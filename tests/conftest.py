import os
import random

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pygame
import pytest


class FakeTimer:
    def __init__(self):
        self.active = False
        self.starts = 0
        self.stops = 0

    def start(self):
        self.active = True
        self.starts += 1

    def stop(self):
        if self.active:
            self.stops += 1
        self.active = False


class FakeSound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def pygame_init():
    pygame.init()
    yield pygame


@pytest.fixture
def fake_timer():
    return FakeTimer()


@pytest.fixture
def fake_sound():
    return FakeSound()
