"""Test package for realty-chat."""
from dotenv import load_dotenv, find_dotenv

# pick up a local .env if there is one; the tests do not require it
load_dotenv(find_dotenv(usecwd=True))
