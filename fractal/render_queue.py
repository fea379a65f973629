# -*- coding: utf-8 -*-
"""
Render frames using a persistent pool of workers fed through queues.

The manager hands out row chunks; workers fill them with the serial
kernels and meet the manager at a barrier once the last chunk is done.
See parallel.py for the choice between threads and forked processes.
With processes, the frame buffer must come from parallel.shared_buffer
and is rejected otherwise.
"""

__all__ = ["RowRenderer"]

import math

from .base import Base
from .parallel import USE_FORK, is_shared_buffer, primitives
from .render_for import FILL_ROWS


class RowRenderer(Base):

    def __init__(self, pixels, num_threads, chunksize=None, use_fork=USE_FORK):

        self.height, self.width = self.check_buffer(pixels)

        # Forked workers would fill private copies of an ordinary array.
        if use_fork and not is_shared_buffer(pixels):
            raise ValueError(
                "worker processes need a frame buffer from parallel.shared_buffer")

        self.pixels = pixels
        self.num_threads = max(1, min(int(num_threads), self.height))

        if chunksize is None:
            chunksize = max(2, int(math.ceil(300 / max(1, self.width) * 2)))
        self.chunksize = max(1, int(chunksize))

        Barrier, Queue, Thread = primitives(use_fork)

        self.barrier_chunk = Barrier(self.num_threads + 1)
        self.queue_job = Queue()
        self.queue_data = Queue()

        # Spawn workers.
        self.consumers = list()
        for wid in range(1, self.num_threads + 1):
            self.consumers.append(Thread(target=self.cpu_task, args=(wid,)))
            self.consumers[-1].start()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.exit()

    def __cpu_task(self, wid):

        # Receive job parameters.
        while True:
            args = self.queue_job.get()
            if args is None: break

            num_chunks, kind, zoom, center_x, center_y, max_iters, param = args
            fill = FILL_ROWS[kind]

            # Process chunk data.
            while True:
                chunk_id, seq = self.queue_data.get()
                if seq:
                    fill(
                        self.pixels, seq, zoom, center_x, center_y, max_iters,
                        param )

                # Wait for any remaining chunks to finish.
                if chunk_id + self.num_threads > num_chunks:
                    self.barrier_chunk.wait()      # sync including manager
                    break

    def cpu_task(self, wid):

        try:
            self.__cpu_task(wid)
        except KeyboardInterrupt:
            pass

    def render(self, viewport, fractal):
        """
        Fill every pixel of the pool's buffer; returns once all chunks are done.
        """
        if self.height == 0 or self.width == 0:
            return

        # Submit job parameters followed by chunked data.
        num_chunks = self.divide_up(self.height, self.chunksize)
        args = ( num_chunks, fractal.kind, float(viewport.zoom),
                 float(viewport.center_x), float(viewport.center_y),
                 fractal.max_iterations(), float(fractal.parameter()) )

        for _ in range(self.num_threads):
            self.queue_job.put(args)

        for i in range(num_chunks):
            start = i * self.chunksize
            stop = start + self.chunksize
            args = (i+1, (start, stop if stop <= self.height else self.height))
            self.queue_data.put(args)

        # Notify available threads to wait.
        if num_chunks < self.num_threads:
            for _ in range(self.num_threads - num_chunks):
                self.queue_data.put((num_chunks, None))

        self.barrier_chunk.wait()

    def exit(self):

        for _ in range(len(self.consumers)):
            self.queue_job.put(None)

        for c in self.consumers:
            c.join()

        self.consumers = list()
