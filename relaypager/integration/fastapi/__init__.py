""" Integration with FastAPI """

from .arguments import relay_arguments, RelayArguments
