#!/usr/bin/env python3
'''
Hide and recover messages into the chunks of PNG files.

 $ pngmsg.py encode image.png ruSt "hello"
 $ pngmsg.py decode image.png ruSt
'''
import sys

from pngmsg.cli import main


if __name__ == '__main__':
    sys.exit(main())
