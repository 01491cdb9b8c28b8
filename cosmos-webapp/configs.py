from pulumi import Config

from utils.utils import load_stack_config


stack_config = load_stack_config(Config())
