from loguru import logger

from pyosm.api import Api
from pyosm.auth import BasicAuth, TokenAuth
from pyosm.model import Changeset, Member, Node, Relation, Way
from pyosm.session import Session

# Library logging stays quiet until the application calls logger.enable("pyosm")
logger.disable("pyosm")

__all__ = [
    "Api",
    "BasicAuth",
    "TokenAuth",
    "Session",
    "Node",
    "Way",
    "Relation",
    "Member",
    "Changeset",
]
