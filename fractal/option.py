# -*- coding: utf-8 -*-
"""
Provides the Option class for config file and command line parsing.
"""

__all__ = ['Option', 'show_keyboard_shortcuts']

import os, sys

from configparser import ConfigParser
from optparse import OptionGroup, OptionParser
from os.path import basename, exists

from .variants import FRACTALS
from .viewport import Viewport

class Option(object):

    def __init__(self, argv=None):

        argv = list(sys.argv[1:] if argv is None else argv)
        self.prog = basename(sys.argv[0]) if sys.argv and sys.argv[0] else "multibrot"

        usage = "%prog [--config filepath [section]] [options]"
        epilog = """
          Values exceeding the range specification are silently clipped to
          the respective minimum or maximum value. The Mandelbrot iteration
          bound and the Multibrot exponent sweep by themselves, one step
          per frame.
          """
        epilog = " ".join([line.lstrip() for line in epilog.splitlines()])

        p = OptionParser(prog=self.prog, usage=usage, version="%prog 0.1.0", epilog=epilog)

        def _opt(parser, opt, t, h):
          if t is None:
            parser.add_option(opt, help=h, action="store_true", default=False)
          else:
            parser.add_option(opt, type=t, help=h, metavar="ARG")

        # allow options with underscore by replacing with dash
        for i in range(len(argv)):
            if argv[i].startswith('--'):
                argv[i] = argv[i].replace('_', '-')

        # configure options
        _opt(p, "--shortcuts", None, "show keyboard shortcuts and exit")
        _opt(p, "--width", "int", "width of window [16-8000]: 640")
        _opt(p, "--height", "int", "height of window [16-5000]: 480")
        _opt(p, "--texture-width", "int", "width of frame buffer [16-8000]: 640")
        _opt(p, "--texture-height", "int", "height of frame buffer [16-5000]: 480")
        _opt(p, "--center-x", "float", "home center-x value [float]: 0.0")
        _opt(p, "--center-y", "float", "home center-y value [float]: 0.0")
        _opt(p, "--zoom", "float", "home zoom, half-width is 3.5 times zoom [float > 0]: 1.0")
        _opt(p, "--fps", "int", "target frames per second [1-120]: 15")
        _opt(p, "--fractal", "string", "initial fractal [mandelbrot,multibrot]: mandelbrot")

        g = OptionGroup(p, "CPU Options")
        _opt(g, "--num-threads", "string", "number of threads to use: auto")
        p.add_option_group(g)

        p.set_defaults(
            width=640, height=480, texture_width=640, texture_height=480,
            center_x=0.0, center_y=0.0, zoom=1.0, fps=15, fractal='mandelbrot',
            num_threads='auto' )

        # optionally, override defaults from a config file
        argv = self.__handle_config(p, argv)

        # process command-line arguments
        (opt, args) = p.parse_args(argv)

        # show usage
        if len(args):
            p.print_help()
            sys.exit(2)
        if opt.shortcuts:
            show_keyboard_shortcuts()
            sys.exit(0)

        fractal = opt.fractal.strip().lower()
        if fractal not in FRACTALS:
            p.error("unknown fractal '{}', expected one of: {}".format(
                opt.fractal, ", ".join(sorted(FRACTALS))))

        # clamp to minimum-maximum values
        self.width = max(16, min(8000, opt.width))
        self.height = max(16, min(5000, opt.height))
        self.texture_width = max(16, min(8000, opt.texture_width))
        self.texture_height = max(16, min(5000, opt.texture_height))
        self.fps = max(1, min(120, opt.fps))
        self.center_x = opt.center_x
        self.center_y = opt.center_y
        self.zoom = opt.zoom if opt.zoom > 0.0 else 1.0
        self.fractal = fractal

        if opt.num_threads != 'auto':
            self.num_threads = max(1, int(opt.num_threads))
        else:
            ncpu = int(
                os.getenv('NUMBA_NUM_THREADS') or
                os.getenv('NUM_THREADS') or
                (os.cpu_count() or 2) - 1
                )
            self.num_threads = max(1, ncpu)

        del opt, args


    def viewport(self):
        return Viewport(self.zoom, self.center_x, self.center_y)


    def __handle_config(self, parser, argv):

        if len(argv) >= 1 and argv[0].startswith('--config'):
            try:
                (_, config_path) = argv[0].split('=')
                del argv[0]
            except ValueError:
                if len(argv) < 2:
                    parser.error("--config option requires a file path")
                config_path = argv[1]
                del argv[1], argv[0]

            if len(argv) >= 1 and not argv[0].startswith('-'):
                section = argv[0]
                del argv[0]
            else:
                section = 'common'

            if not exists(config_path):
                mesg = f"{self.prog}: error: no such file or directory: '{config_path}'"
                print(mesg, file=sys.stderr)
                sys.exit(2)

            config = ConfigParser(default_section=None, empty_lines_in_values=False)
            config.read(config_path)

            if config.has_section('common'):
                self.__override_defaults(parser, config, 'common')
            if section != 'common' or not config.has_section('common'):
                self.__override_defaults(parser, config, section)

        return argv


    def __override_defaults(self, parser, config, section):

        if not config.has_section(section):
            mesg = f"{self.prog}: error: no such section in config: '{section}'"
            print(mesg, file=sys.stderr)
            sys.exit(2)

        opt = dict()

        for key in ('width', 'height', 'texture_width', 'texture_height', 'fps'):
            if config.has_option(section, key):
                opt[key] = int(config.get(section, key))

        for key in ('center_x', 'center_y', 'zoom'):
            if config.has_option(section, key):
                opt[key] = float(config.get(section, key))

        for key in ('fractal', 'num_threads'):
            if config.has_option(section, key):
                opt[key] = str(config.get(section, key))

        if len(opt):
            parser.set_defaults(**opt)


def show_keyboard_shortcuts():

    print("""
Keyboard shortcuts:
  Keys act while held down, one step per frame.
  Escape)              terminate the application and exit
  r) Home)             reset window back to the home location
  e) PageUp) KP+)      zoom in by a factor of 1.25
  q) PageDn) KP-)      zoom out by a factor of 1.25
  a) Left) KP4)        scroll window left by 0.1 x zoom
  d) Right) KP6)       scroll window right by 0.1 x zoom
  w) Up) KP8)          scroll window up by 0.1 x zoom
  s) Down) KP2)        scroll window down by 0.1 x zoom

  Fractal:
    F1)                Mandelbrot, the iteration bound sweeps 0 to 511
    F2)                Multibrot, the exponent d sweeps 0.5 to 5.0
    """.strip())


if __name__ == '__main__':
    print(vars(Option()))
