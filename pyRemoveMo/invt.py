## @file invt.py
## @brief Inventory lookups by managed object type
"""
Inventory lookups by managed object type

Objects are collected through a container view and the property
collector, the same way the vSphere Web Services SDK samples do it.
"""

import logging

from pyVmomi import vmodl, vim


def GetObjectsByType(content, root, moType):
    """
    Returns a dict mapping the name of every managed object of type moType
    reachable from root to the object itself.
    """
    view = content.viewManager.CreateContainerView(container=root,
                                                   type=[moType],
                                                   recursive=True)
    try:
        PC = vmodl.query.PropertyCollector
        objectSet = content.propertyCollector.RetrieveContents([
            PC.FilterSpec(
                propSet=[PC.PropertySpec(type=moType, pathSet=["name"])],
                objectSet=[
                    PC.ObjectSpec(
                        obj=view,
                        skip=True,
                        selectSet=[
                            PC.TraversalSpec(name="traverseEntities",
                                             type=vim.view.ContainerView,
                                             path="view",
                                             skip=False)
                        ])
                ])
        ])
    finally:
        view.Destroy()

    result = {}
    for oc in objectSet or []:
        for prop in oc.propSet:
            if prop.name == "name":
                result[prop.val] = oc.obj
    logging.debug("Found %d objects of type %s" %
                  (len(result), moType.__name__))
    return result


def FindObject(content, root, moType, name):
    """
    Find the managed object of type moType with the given name. Returns
    None if there is no such object.
    """
    return GetObjectsByType(content, root, moType).get(name)
