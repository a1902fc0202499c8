from pyosm.model import ELEMENT_TYPES, Changeset, Node, Relation, Way, is_new


def test_drafts_have_no_id():
    node = Node(lat=1.0, lon=2.0)
    assert node.id is None
    assert is_new(node)
    assert not is_new(node._replace(id=5))


def test_each_element_gets_its_own_tags():
    a = Node()
    b = Node()
    a.tags['amenity'] = 'cafe'
    assert b.tags == {}


def test_type_names():
    assert [cls.type for cls in ELEMENT_TYPES.values()] == ['node', 'way', 'relation', 'changeset']
    assert ELEMENT_TYPES['way'] is Way
    assert Relation(id=1).type == 'relation'


def test_changeset_starts_without_tags_or_state():
    changeset = Changeset()
    assert changeset.tags == {}
    assert changeset.open is None
    assert changeset.id is None
