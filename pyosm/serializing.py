import datetime
from lxml import etree

# Attribute order written for each primitive; tags and children follow.
ATTRIBUTES = {
    'node': ('id', 'version', 'changeset', 'user', 'uid', 'visible', 'timestamp', 'lat', 'lon'),
    'way': ('id', 'version', 'changeset', 'user', 'uid', 'visible', 'timestamp'),
    'relation': ('id', 'version', 'changeset', 'user', 'uid', 'visible', 'timestamp'),
    'changeset': ('id', 'created_at', 'closed_at', 'open', 'min_lat', 'max_lat', 'min_lon', 'max_lon', 'user', 'uid'),
}

def datetimeToIso(d):
    return d.strftime("%Y-%m-%dT%H:%M:%SZ")

def attributeValue(value):
    if isinstance(value, bool):
        return 'true' if value else 'false'
    elif isinstance(value, datetime.datetime):
        return datetimeToIso(value)
    return str(value)

def to_element(obj):
    """Build the lxml element for one OSM primitive."""

    elem = etree.Element(obj.type)
    for name in ATTRIBUTES[obj.type]:
        value = getattr(obj, name)
        if value is not None:
            elem.set(name, attributeValue(value))

    if obj.type == 'way':
        for ref in obj.nds or []:
            etree.SubElement(elem, 'nd', ref=str(ref))
    elif obj.type == 'relation':
        for member in obj.members or []:
            etree.SubElement(elem, 'member', type=member.type, ref=str(member.ref), role=member.role or '')

    for k, v in (obj.tags or {}).items():
        etree.SubElement(elem, 'tag', k=k, v=v)

    return elem

def to_xml(obj, generator='pyosm'):
    """Serialize a primitive into an <osm> document, returned as UTF-8 bytes."""

    root = etree.Element('osm', version='0.6', generator=generator)
    root.append(to_element(obj))
    return etree.tostring(root, xml_declaration=True, encoding='UTF-8')
