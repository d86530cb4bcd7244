""" Mobile Hub: project export. This service is REST-style; the project
    identifier travels in the URI path rather than in the payload.
"""

from .. import client
from ..protocol.binding import Field, Model
from ..protocol.fields import PATH, QUERY, STRUCTURED


class ExportProjectRequest(Model):
    project_id = Field('projectId', location=PATH)


class ExportProjectResult(Model):
    download_url = Field('downloadUrl')
    share_url = Field('shareUrl')
    snapshot_id = Field('snapshotId')


class DescribeProjectRequest(Model):
    project_id = Field('projectId', location=QUERY)
    sync_from_resources = Field('syncFromResources', location=QUERY, type=bool)


class ProjectDetails(Model):
    name = Field('name')
    project_id = Field('projectId')
    region = Field('region')
    state = Field('state')
    console_url = Field('consoleUrl')


class DescribeProjectResult(Model):
    details = Field('details', kind=STRUCTURED, type=ProjectDetails)


EXPORT_PROJECT = client.Operation('ExportProject', ExportProjectRequest, ExportProjectResult,
                                  method='POST', uri='/exports/{projectId}')
DESCRIBE_PROJECT = client.Operation('DescribeProject', DescribeProjectRequest, DescribeProjectResult,
                                    method='GET', uri='/project')


class MobileClient(client.Client):

    service = 'mobile'

    def export_project(self, request):
        return self.invoke(EXPORT_PROJECT, request)

    def export_project_async(self, request, callback=None):
        return self.invoke_async(EXPORT_PROJECT, request, callback)

    def describe_project(self, request):
        return self.invoke(DESCRIBE_PROJECT, request)

    def describe_project_async(self, request, callback=None):
        return self.invoke_async(DESCRIBE_PROJECT, request, callback)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
