# -*- coding: utf-8 -*-
"""
Provides auto-selection of various classes for multi-platform support,
plus a shared-memory frame buffer for forked workers.
"""

__all__ = ['USE_FORK', 'primitives', 'shared_buffer', 'is_shared_buffer']

import ctypes
import os, sys
import queue
import threading
import multiprocessing

import numpy as np

from multiprocessing import RawArray

# By default use threading on macOS and Windows. Use fork otherwise.
# On UNIX platforms, one may set an environment variable to override
# FRACTAL_USE_FORK=0 or FRACTAL_USE_FORK=1.

if sys.platform == 'win32':
    USE_FORK = 0
else:
    val = os.getenv('FRACTAL_USE_FORK')
    if val is None or val == 'auto':
        USE_FORK = 0 if sys.platform == 'darwin' else 1
    else:
        USE_FORK = int(val)


def primitives(use_fork):
    """
    Returns the (Barrier, Queue, Thread) classes for processes or threads.
    """
    if use_fork:
        ctx = multiprocessing.get_context('fork')
        return ctx.Barrier, ctx.SimpleQueue, ctx.Process

    # SimpleQueue has lesser overhead than Queue.
    return threading.Barrier, queue.SimpleQueue, threading.Thread


def shared_buffer(height, width):
    """
    Allocate a (height, width, 4) RGBA frame buffer backed by shared memory,
    so writes made by forked workers are seen by the parent.
    """
    shm = RawArray(np.ctypeslib.ctypes.c_uint8, max(1, int(height * width * 4)))
    pixels = np.ctypeslib.as_array(shm)[:height * width * 4]

    return pixels.reshape((height, width, 4))


def is_shared_buffer(pixels):
    """
    True if the array's memory comes from a multiprocessing RawArray.
    """
    obj = pixels
    while obj is not None:
        # RawArray returns a ctypes array holding its heap block in _wrapper.
        if isinstance(obj, ctypes.Array):
            return hasattr(obj, '_wrapper')
        if isinstance(obj, memoryview):
            obj = obj.obj
        else:
            obj = getattr(obj, 'base', None)

    return False


if __name__ == '__main__':
    print("use_fork: {}".format(USE_FORK))
