#!/usr/bin/env python

"""
Copyright (c) 2010-2022 VMware, Inc.  All rights reserved.

This module is used to test inventory lookups by type
"""
__author__ = "VMware, Inc"

import unittest
from unittest import mock

from pyVmomi import vmodl, vim

from pyRemoveMo import invt


def ObjectContent(obj, name):
   return vmodl.query.PropertyCollector.ObjectContent(
      obj=obj, propSet=[vmodl.DynamicProperty(name="name", val=name)])


class TestInvt(unittest.TestCase):
   ## Setup
   #
   def setUp(self):
      self.root = vim.Folder("group-d1")
      self.view = mock.MagicMock(spec=vim.view.ContainerView)
      self.view.Destroy = mock.Mock()
      self.content = mock.Mock()
      self.content.viewManager.CreateContainerView.return_value = self.view
      self.retrieve = self.content.propertyCollector.RetrieveContents

   def test_GetObjectsByType(self):
      fold = vim.Folder("group-v10")
      other = vim.Folder("group-v11")
      self.retrieve.return_value = [ObjectContent(fold, "Fold"),
                                    ObjectContent(other, "Other")]

      result = invt.GetObjectsByType(self.content, self.root, vim.Folder)

      self.assertEqual(result, {"Fold": fold, "Other": other})
      self.content.viewManager.CreateContainerView.assert_called_once_with(
         container=self.root, type=[vim.Folder], recursive=True)
      self.view.Destroy.assert_called_once_with()

   def test_FilterSpec(self):
      self.retrieve.return_value = []
      invt.GetObjectsByType(self.content, self.root, vim.HostSystem)

      (specs,), _ = self.retrieve.call_args
      self.assertEqual(len(specs), 1)
      propSpec = specs[0].propSet[0]
      self.assertEqual(list(propSpec.pathSet), ["name"])
      objSpec = specs[0].objectSet[0]
      self.assertIs(objSpec.obj, self.view)
      self.assertTrue(objSpec.skip)
      self.assertEqual(objSpec.selectSet[0].path, "view")

   def test_ViewDestroyedOnFault(self):
      self.retrieve.side_effect = vim.fault.NoPermission()
      self.assertRaises(vim.fault.NoPermission, invt.GetObjectsByType,
                        self.content, self.root, vim.VirtualMachine)
      self.view.Destroy.assert_called_once_with()

   def test_FindObject(self):
      vm1 = vim.VirtualMachine("vm-42")
      self.retrieve.return_value = [ObjectContent(vm1, "VM1")]
      self.assertIs(invt.FindObject(self.content, self.root,
                                    vim.VirtualMachine, "VM1"), vm1)
      self.assertIsNone(invt.FindObject(self.content, self.root,
                                        vim.VirtualMachine, "vm1"))


if __name__ == "__main__":
   unittest.main()
