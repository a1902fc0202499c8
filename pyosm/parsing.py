import pyosm.model as model
from pyosm.errors import GenericError
import datetime
import io
from lxml import etree

def isoToDatetime(s):
    """Parse a ISO8601-formatted string to a Python datetime."""
    if s is None:
        return s
    else:
        return datetime.datetime.strptime(s, "%Y-%m-%dT%H:%M:%SZ")

def maybeInt(s):
    return int(s) if s is not None else s

def maybeFloat(s):
    return float(s) if s is not None else s

def maybeBool(s):
    return s == 'true' if s is not None else s

def _start_element(elem, parse_timestamps):
    """Build the (still empty) OSM primitive for an opening tag, or None if
    the tag isn't a primitive."""

    def timestamp(name):
        return isoToDatetime(elem.get(name)) if parse_timestamps else elem.get(name)

    if elem.tag == 'node':
        return model.Node(
            maybeInt(elem.get('id')),
            maybeInt(elem.get('version')),
            maybeInt(elem.get('changeset')),
            elem.get('user'),
            maybeInt(elem.get('uid')),
            maybeBool(elem.get('visible')),
            timestamp('timestamp'),
            maybeFloat(elem.get('lat')),
            maybeFloat(elem.get('lon')),
            {}
        )
    elif elem.tag == 'way':
        return model.Way(
            maybeInt(elem.get('id')),
            maybeInt(elem.get('version')),
            maybeInt(elem.get('changeset')),
            elem.get('user'),
            maybeInt(elem.get('uid')),
            maybeBool(elem.get('visible')),
            timestamp('timestamp'),
            [],
            {}
        )
    elif elem.tag == 'relation':
        return model.Relation(
            maybeInt(elem.get('id')),
            maybeInt(elem.get('version')),
            maybeInt(elem.get('changeset')),
            elem.get('user'),
            maybeInt(elem.get('uid')),
            maybeBool(elem.get('visible')),
            timestamp('timestamp'),
            [],
            {}
        )
    elif elem.tag == 'changeset':
        return model.Changeset(
            maybeInt(elem.get('id')),
            timestamp('created_at'),
            timestamp('closed_at'),
            maybeBool(elem.get('open')),
            maybeFloat(elem.get('min_lat')),
            maybeFloat(elem.get('max_lat')),
            maybeFloat(elem.get('min_lon')),
            maybeFloat(elem.get('max_lon')),
            elem.get('user'),
            maybeInt(elem.get('uid')),
            {}
        )
    return None

def _add_child(obj, elem):
    if elem.tag == 'tag':
        obj.tags[elem.attrib['k']] = elem.attrib['v']
    elif elem.tag == 'nd':
        obj.nds.append(int(elem.attrib['ref']))
    elif elem.tag == 'member':
        obj.members.append(
            model.Member(
                elem.attrib['type'],
                int(elem.attrib['ref']),
                elem.get('role', '')
            )
        )

def iter_osm_change_file(f, parse_timestamps=True):
    """Parse a file-like containing osmChange XML and yield one
    (action, primitive) tuple at a time to the caller."""

    action = None
    obj = None
    for event, elem in etree.iterparse(f, events=('start', 'end')):
        if event == 'start':
            if elem.tag in ('create', 'modify', 'delete'):
                action = elem.tag
            elif obj is None:
                obj = _start_element(elem, parse_timestamps)
            else:
                _add_child(obj, elem)
        elif event == 'end':
            if obj is not None and elem.tag == obj.type:
                yield (action, obj)
                obj = None
            elif elem.tag in ('create', 'modify', 'delete'):
                action = None

            elem.clear()
            while elem.getprevious() is not None:
                del elem.getparent()[0]

def iter_osm_file(f, parse_timestamps=True):
    """Parse a file-like containing OSM XML and yield one OSM primitive at a time
    to the caller."""

    obj = None
    for event, elem in etree.iterparse(f, events=('start', 'end')):
        if event == 'start':
            if obj is None:
                obj = _start_element(elem, parse_timestamps)
            else:
                _add_child(obj, elem)
        elif event == 'end':
            if obj is not None and elem.tag == obj.type:
                yield obj
                obj = None

            elem.clear()
            while elem.getprevious() is not None:
                del elem.getparent()[0]

def _as_bytes(content):
    if isinstance(content, str):
        return content.encode('utf-8')
    return content

def parse_osm(content, parse_timestamps=True):
    """Parse an <osm> document (bytes or str) into a list of primitives."""

    content = _as_bytes(content)
    try:
        return list(iter_osm_file(io.BytesIO(content), parse_timestamps))
    except etree.XMLSyntaxError:
        raise GenericError(content.decode('utf-8', 'replace'), 200)

def parse_osm_change(content, parse_timestamps=True):
    """Parse an <osmChange> document into a list of (action, primitive) tuples."""

    content = _as_bytes(content)
    try:
        return list(iter_osm_change_file(io.BytesIO(content), parse_timestamps))
    except etree.XMLSyntaxError:
        raise GenericError(content.decode('utf-8', 'replace'), 200)

def parse_element(content, type=None, parse_timestamps=True):
    """Return the first primitive (optionally of the given type) in an <osm>
    document."""

    for obj in parse_osm(content, parse_timestamps):
        if type is None or obj.type == type:
            return obj

    raise GenericError(_as_bytes(content).decode('utf-8', 'replace'), 200)

def parse_user_id(content):
    """Pull the numeric user id out of a /user/details response."""

    content = _as_bytes(content)
    try:
        user = etree.fromstring(content).find('user')
    except etree.XMLSyntaxError:
        user = None
    if user is None or user.get('id') is None:
        raise GenericError(content.decode('utf-8', 'replace'), 200)
    return int(user.get('id'))

def parse_id(content):
    """Responses to create and update calls are a bare number in plain text."""

    text = _as_bytes(content).decode('utf-8', 'replace').strip()
    try:
        return int(text)
    except ValueError:
        raise GenericError(text, 200)
