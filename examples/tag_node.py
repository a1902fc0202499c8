from pyosm import Api, BasicAuth, Session
from pyosm.config import ApiConfig
from pyosm.errors import OsmError
from loguru import logger
import os
import sys

if len(sys.argv) != 4:
    sys.stderr.write("Synopsis:\n")
    sys.stderr.write("    %s <node-id> <key> <value>\n" % sys.argv[0])
    sys.stderr.write("Credentials come from OSM_USER and OSM_PASSWORD, the endpoint from PYOSM_API_URL.\n")
    sys.exit(1)

logger.enable("pyosm")

session = Session(BasicAuth(os.environ['OSM_USER'], os.environ['OSM_PASSWORD']))
api = Api(session, config=ApiConfig.from_env())

try:
    node = api.find_node(int(sys.argv[1]))
    node.tags[sys.argv[2]] = sys.argv[3]

    changeset = api.ensure_changeset()
    node = api.save(node)
except OsmError as e:
    sys.stderr.write("%s\n" % e)
    sys.exit(1)

sys.stdout.write('node %d is now version %d in changeset %d\n' % (node.id, node.version, changeset.id))
