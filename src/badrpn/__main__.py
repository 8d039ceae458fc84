from sys import exit

from .cli import CLI


if __name__ == '__main__':
    exit(CLI().run())
