import sys

from colorama import Fore, Style, init
init(autoreset=True)


def _emit(color, msg, stream=None):
    stream = stream or sys.stdout
    print(color + str(msg) + Style.RESET_ALL, file=stream)


def print_info(msg):
    _emit(Fore.CYAN, msg)

def print_warn(msg):
    _emit(Fore.YELLOW, msg)

def print_error(msg):
    _emit(Fore.RED, msg, sys.stderr)

def print_success(msg):
    _emit(Fore.GREEN, msg)
