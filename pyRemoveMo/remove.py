#!/usr/bin/env python
"""
Copyright (c) 2010-2022 VMware, Inc.  All rights reserved.

This module destroys or unregisters a managed inventory object like a
host, vm, folder, resource pool or datacenter.
"""
__author__ = "VMware, Inc"

import logging

from pyVim.task import WaitForTask
from pyVmomi import vmodl, vim

from pyRemoveMo import RemoveArgumentException
from pyRemoveMo import invt

__all__ = [
   "CanonicalObjectType",
   "OBJECT_TYPES",
   "OP_REMOVE",
   "OP_UNREGISTER",
   "OP_UNREGISTER_VM",
   "RemoveManagedObject",
   "ResolveOperation",
   "ValidateInput",
   "ValidateObjectType",
   "ValidateOperation",
]

# Managed object types that can be removed, in the order they are listed
OBJECT_TYPES = {
   "HostSystem": vim.HostSystem,
   "VirtualMachine": vim.VirtualMachine,
   "Folder": vim.Folder,
   "ResourcePool": vim.ResourcePool,
   "Datacenter": vim.Datacenter,
}

_OBJECT_TYPES_BY_LOWER = dict((name.lower(), name) for name in OBJECT_TYPES)

OP_REMOVE = "remove"
OP_UNREGISTER = "unregister"
OP_UNREGISTER_VM = "unregisterVM"

VIRTUAL_MACHINE = "VirtualMachine"


## Canonical spelling of an object type
#
# @param  objType Object type, any case
# @return the key in OBJECT_TYPES, or None
def CanonicalObjectType(objType):
   if objType is None:
      return None
   return _OBJECT_TYPES_BY_LOWER.get(objType.lower())


def ValidateObjectType(objType):
   """ True if objType names one of OBJECT_TYPES, ignoring case """
   return CanonicalObjectType(objType) is not None


def ValidateOperation(operation):
   """ Raise RemoveArgumentException unless operation is remove/unregister """
   if operation:
      if operation.lower() not in (OP_REMOVE, OP_UNREGISTER):
         raise RemoveArgumentException("Invalid Operation type")
   return True


def ValidateInput(objType, operation):
   """ Check the operation and the object type before anything is sent """
   ValidateOperation(operation)

   if not ValidateObjectType(objType):
      names = "".join("'%s' " % name for name in OBJECT_TYPES)
      raise RemoveArgumentException(
         "Invalid --objtype %s! Object Type should be one of: %s" %
         (objType, names))
   return True


## Pick the operation to run
#
# No operation means unregister for a virtual machine and remove for
# everything else. Any other operation that is not exactly "remove" or
# "unregisterVM" becomes "unregisterVM", so "unregister" and also "REMOVE"
# end up on the unregister path.
#
# @param  objType   Object type
# @param  operation Operation given on the command line, may be None
# @return OP_REMOVE or OP_UNREGISTER_VM
def ResolveOperation(objType, operation):
   isVm = objType is not None and objType.lower() == VIRTUAL_MACHINE.lower()
   if not operation:
      return isVm and OP_UNREGISTER_VM or OP_REMOVE
   if operation not in (OP_REMOVE, OP_UNREGISTER_VM):
      return OP_UNREGISTER_VM
   return operation


## Remove managed object
#
class RemoveManagedObject:
   """
   Destroy or unregister the managed object named by the options.

   Results are printed to standard output. Run() returns True when the
   operation went through and False when the object was not found or the
   destroy task failed.
   """

   def __init__(self, si, options):
      self.si = si
      self.objtype = options.objtype
      self.objname = options.objname
      self.operation = options.operation

   def Run(self):
      ValidateInput(self.objtype, self.operation)
      self.operation = ResolveOperation(self.objtype, self.operation)
      logging.info("Resolved operation %s for %s : %s" %
                   (self.operation, self.objtype, self.objname))
      return self.DeleteManagedObject()

   def FindManagedObject(self):
      content = self.si.RetrieveContent()
      moType = OBJECT_TYPES[CanonicalObjectType(self.objtype)]
      return invt.FindObject(content, content.rootFolder, moType,
                             self.objname)

   def DeleteManagedObject(self):
      obj = self.FindManagedObject()
      if obj is None:
         print("Unable to find object of type  %s with name  %s" %
               (self.objtype, self.objname))
         print(" : Failed %s of %s : %s" %
               (self.operation, self.objtype, self.objname))
         return False

      if self.operation == OP_REMOVE:
         succeeded = self.Destroy(obj)
      elif CanonicalObjectType(self.objtype) == VIRTUAL_MACHINE:
         logging.debug("Unregistering %s" % obj)
         obj.Unregister()
         succeeded = True
      else:
         raise RemoveArgumentException("Invalid Operation specified.")

      print("Successfully completed %s for %s : %s" %
            (self.operation, self.objtype, self.objname))
      return succeeded

   def Destroy(self, obj):
      """ Destroy obj and wait for the task to succeed or fail """
      logging.debug("Destroying %s" % obj)
      task = obj.Destroy()
      try:
         state = WaitForTask(task, raiseOnError=False, si=self.si)
      except vmodl.fault.ManagedObjectNotFound:
         # The task can disappear together with the entity it destroyed
         state = vim.TaskInfo.State.success

      if state == vim.TaskInfo.State.success:
         print("Success Managed Entity - [ %s ] deleted " % self.objname)
         return True

      try:
         error = task.info.error
      except vmodl.fault.ManagedObjectNotFound:
         error = None
      logging.error("Destroy of %s failed: %s" % (self.objname, error))
      print("Failure Deletion of Managed Entity - [ %s ] " % self.objname)
      return False
