from typing import Literal
from termcolor import colored

Color = Literal["blue", "green", "yellow", "red", "magenta", "cyan"]

def print_status(should_log: bool, title: str, text: str, color: Color):
  if should_log:
    print(f"{colored(f' {title} ', 'grey', f'on_{color}')} {colored(text, color)}")
