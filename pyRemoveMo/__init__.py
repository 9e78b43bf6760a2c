"""
Copyright (c) 2010-2022 VMware, Inc.  All rights reserved.

Destroy or unregister a managed inventory object (host, vm, folder,
resource pool or datacenter) on a vCenter Server or ESXi host.
"""
__author__ = "VMware, Inc"

__all__ = [
   "RemoveArgumentException",
   "RemoveException",
   "RemoveLoginException",
]

## Remove exception
#
class RemoveException(Exception):
   """ Remove exception """
   message = ""

   def __init__(self, message=None):
      """ Constructor """
      Exception.__init__(self, message)
      self.message = message

   def __str__(self):
      return self.message or ""


## Remove argument exception
#
class RemoveArgumentException(RemoveException):
   def __init__(self, message=None):
      RemoveException.__init__(self, message)


## Remove login exception
#
class RemoveLoginException(RemoveException):
   def __init__(self, err, message=None):
      RemoveException.__init__(self, message)
      self.err = err
