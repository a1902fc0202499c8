import requests
from loguru import logger

from pyosm.config import get_config
from pyosm.errors import ChangesetMissing, CredentialsMissing, InvalidArgument, check_response_codes
from pyosm.model import ELEMENT_TYPES, Changeset, is_new
from pyosm.parsing import parse_element, parse_id, parse_osm, parse_osm_change, parse_user_id
from pyosm.serializing import to_xml
from pyosm.session import Session


def _check_type(kind, allowed=tuple(ELEMENT_TYPES)):
    if kind not in allowed:
        raise InvalidArgument("type needs to be one of %s, got %r" % (', '.join(allowed), kind))

def _check_id(thing_id, what='id'):
    # bool is an int subclass but never a valid id
    if type(thing_id) is not int or thing_id <= 0:
        raise InvalidArgument("%s needs to be a positive integer, got %r" % (what, thing_id))


class Api(object):
    """Client for the OSM editing API.

    Reads are unauthenticated. Writes use the credentials of the session and
    need an open changeset to update existing elements::

        session = Session(BasicAuth('user', 'a_password'))
        api = Api(session)
        node = api.find_node(1234)
        node.tags['wheelchair'] = 'no'
        api.ensure_changeset()
        api.save(node)
    """

    def __init__(self, session=None, config=None, http=None):
        self.session = session if session is not None else Session()
        self.config = config if config is not None else get_config()
        self._http = http if http is not None else requests.Session()
        self._base = self.config.root
        self.USER_AGENT = self.config.user_agent

    @property
    def changeset(self):
        return self.session.changeset

    def _request(self, method, path, authenticated=False, **kwargs):
        credentials = None
        if authenticated:
            credentials = self.session.credentials
            if credentials is None:
                raise CredentialsMissing()

        headers = {
            'User-Agent': self.USER_AGENT
        }
        headers.update(kwargs.pop('headers', {}))

        logger.debug("{} {}{} (auth={})", method, self._base, path, authenticated)
        response = self._http.request(
            method,
            self._base + path,
            headers=headers,
            auth=credentials,
            timeout=self.config.timeout,
            **kwargs
        )
        check_response_codes(response)
        return response

    # most GET requests are valid without authentication
    def _get(self, path, params=None):
        return self._request('GET', path, params=params)

    def _authenticated_get(self, path, params=None):
        return self._request('GET', path, authenticated=True, params=params)

    # all PUT and POST requests need authentication
    def _put(self, path, body):
        return self._request('PUT', path, authenticated=True, data=body,
                             headers={'Content-Type': 'text/xml; charset=utf-8'})

    def _post(self, path, body):
        return self._request('POST', path, authenticated=True, data=body,
                             headers={'Content-Type': 'text/xml; charset=utf-8'})

    def _get_as_osm(self, path, params=None):
        return parse_osm(self._get(path, params).content)

    def find(self, kind, thing_id, version=None):
        """Get a node, way, relation or changeset by id (and optionally version)."""
        _check_type(kind)
        _check_id(thing_id)
        path = '/{}/{}'.format(kind, thing_id)
        if version is not None:
            _check_id(version, 'version')
            path += '/' + str(version)

        return parse_element(self._get(path).content, kind)

    def find_node(self, node_id, version=None):
        return self.find('node', node_id, version)

    def find_way(self, way_id, version=None):
        return self.find('way', way_id, version)

    def find_relation(self, relation_id, version=None):
        return self.find('relation', relation_id, version)

    def find_changeset(self, changeset_id):
        return self.find('changeset', changeset_id)

    def find_history(self, kind, thing_id):
        """All versions of a node, way or relation, oldest first."""
        _check_type(kind, ('node', 'way', 'relation'))
        _check_id(thing_id)
        return self._get_as_osm('/{}/{}/history'.format(kind, thing_id))

    def _find_many(self, kind, thing_ids):
        thing_ids = list(thing_ids)
        if not thing_ids:
            raise InvalidArgument("need at least one id")
        for thing_id in thing_ids:
            _check_id(thing_id)

        plural_kind = kind + 's'
        return self._get_as_osm('/{}'.format(plural_kind),
                                params={plural_kind: ','.join(str(i) for i in thing_ids)})

    def find_nodes(self, node_ids):
        return self._find_many('node', node_ids)

    def find_ways(self, way_ids):
        return self._find_many('way', way_ids)

    def find_relations(self, relation_ids):
        return self._find_many('relation', relation_ids)

    def find_changeset_download(self, changeset_id):
        """The changes made in a changeset as (action, element) tuples."""
        _check_id(changeset_id)
        response = self._get('/changeset/{}/download'.format(changeset_id))
        return parse_osm_change(response.content)

    def find_user_id(self):
        response = self._authenticated_get('/user/details')
        return parse_user_id(response.content)

    def save(self, element):
        """Create the element if it has no id yet, otherwise update it."""
        if self.session.credentials is None:
            raise CredentialsMissing()
        if is_new(element):
            return self.create(element)
        return self.update(element)

    def create(self, element):
        if self.session.credentials is None:
            raise CredentialsMissing()
        _check_type(element.type)
        if element.type != 'changeset' and self.changeset is not None:
            element = element._replace(changeset=self.changeset.id)

        response = self._put('/{}/create'.format(element.type), to_xml(element))
        new_id = parse_id(response.content)
        logger.info("Created {} {}", element.type, new_id)

        if element.type == 'changeset':
            return Changeset(id=new_id)
        return element._replace(id=new_id)

    def update(self, element):
        if self.session.credentials is None:
            raise CredentialsMissing()
        if self.changeset is None or self.changeset.open is not True:
            raise ChangesetMissing()
        _check_type(element.type)
        _check_id(element.id)
        if element.type != 'changeset':
            element = element._replace(changeset=self.changeset.id)

        response = self._post('/{}/{}'.format(element.type, element.id), to_xml(element))
        logger.info("Updated {} {}", element.type, element.id)

        if response.content.lstrip().startswith(b'<'):
            return parse_element(response.content, element.type)
        return element._replace(version=parse_id(response.content))

    def find_open_changeset(self):
        """The user's first open changeset, or None."""
        user_id = self.find_user_id()
        response = self._authenticated_get('/changesets', params={'open': 'true', 'user': user_id})
        changesets = [c for c in parse_osm(response.content) if c.type == 'changeset']
        return changesets[0] if changesets else None

    def create_changeset(self, tags=None):
        return self.create(Changeset(tags=tags))

    def ensure_changeset(self):
        """Find or create the open changeset for this session."""
        return self.session.ensure_current(self)
