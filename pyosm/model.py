import collections

## OSM Objects
Member = collections.namedtuple('Member', 'type, ref, role')


def _element(name, fields, kind):
    fields = fields.replace(',', ' ').split()
    base = collections.namedtuple(name, fields, defaults=(None,) * len(fields))

    def __new__(cls, *args, **kwargs):
        self = base.__new__(cls, *args, **kwargs)
        if self.tags is None:
            # Every element gets its own tag dict
            self = self._replace(tags={})
        return self

    return type(name, (base,), {
        '__slots__': (),
        '__new__': __new__,
        'type': kind,
    })


Node = _element('Node', 'id, version, changeset, user, uid, visible, timestamp, lat, lon, tags', 'node')
Way = _element('Way', 'id, version, changeset, user, uid, visible, timestamp, nds, tags', 'way')
Relation = _element('Relation', 'id, version, changeset, user, uid, visible, timestamp, members, tags', 'relation')
Changeset = _element('Changeset', 'id, created_at, closed_at, open, min_lat, max_lat, min_lon, max_lon, user, uid, tags', 'changeset')

ELEMENT_TYPES = collections.OrderedDict([
    ('node', Node),
    ('way', Way),
    ('relation', Relation),
    ('changeset', Changeset),
])


def is_new(element):
    """True if the element has not been assigned an id by the server yet."""
    return element.id is None
