import logging
import os
import sys

from pngmsg import commands
from pngmsg.exceptions import PngMsgException


logger = logging.getLogger(__name__)


def usage(progname):
    print(f'''usage: {progname} <command> [arguments...]

Commands:

  encode <png file> <chunk type> <message>    hide a message into a new chunk
  decode <png file> <chunk type>              show the message of the first chunk of that type
  remove <png file> <chunk type>              remove the first chunk of that type
  print  <png file>                           print all the chunks

For example

 $ {progname} encode image.png ruSt "This is where your secret message will be!"

appends a private, ancillary chunk of type "ruSt" containing the message.''')
    sys.exit(1)


def do_encode(path, chunk_type, message):
    chunk = commands.encode(path, chunk_type, message)
    return f'[i] Encoded message into chunk {chunk}'


def do_remove(path, chunk_type):
    chunk = commands.remove(path, chunk_type)
    return f'[i] Removed chunk {chunk}'


# command name -> (callable, number of arguments)
COMMANDS = {
    'encode': (do_encode, 3),
    'decode': (commands.decode, 2),
    'remove': (do_remove, 2),
    'print': (commands.print_chunks, 1),
}


def main(argv=None):
    argv = sys.argv if argv is None else argv
    progname = os.path.basename(argv[0]) if argv else 'pngmsg'

    logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)

    if len(argv) < 2 or argv[1] not in COMMANDS:
        usage(progname)

    command, n_args = COMMANDS[argv[1]]
    args = argv[2:]

    if len(args) != n_args:
        usage(progname)

    logger.debug('running command \'%s\' with arguments %s' % (argv[1], args))

    try:
        output = command(*args)
    except (PngMsgException, UnicodeDecodeError, OSError) as e:
        print(f'{progname}: {e}', file=sys.stderr)
        return 1

    print(output)

    return 0
