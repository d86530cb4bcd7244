""" Simple Workflow: domains, workflow types, and workflow executions.
"""

import datetime

from .. import client
from ..protocol.binding import Field, Model
from ..protocol.fields import LIST, STRUCTURED
from ..protocol.variant import Enumerated, register


@register
class RegistrationStatus(Enumerated):
    REGISTERED = 'REGISTERED'
    DEPRECATED = 'DEPRECATED'


@register
class ChildPolicy(Enumerated):
    TERMINATE = 'TERMINATE'
    REQUEST_CANCEL = 'REQUEST_CANCEL'
    ABANDON = 'ABANDON'


class WorkflowType(Model):
    name = Field('name')
    version = Field('version')


class TaskList(Model):
    name = Field('name')


class DomainInfo(Model):
    name = Field('name')
    status = Field('status', type=RegistrationStatus)
    description = Field('description')


class DomainInfos(Model):
    domain_infos = Field('domainInfos', kind=LIST, member=STRUCTURED, type=DomainInfo)
    next_page_token = Field('nextPageToken')


class ListDomainsRequest(Model):
    next_page_token = Field('nextPageToken')
    registration_status = Field('registrationStatus', type=RegistrationStatus)
    maximum_page_size = Field('maximumPageSize', type=int)
    reverse_order = Field('reverseOrder', type=bool)


class RegisterDomainRequest(Model):
    name = Field('name')
    description = Field('description')
    workflow_execution_retention_period_in_days = Field('workflowExecutionRetentionPeriodInDays')


class DeprecateDomainRequest(Model):
    name = Field('name')


class StartWorkflowExecutionRequest(Model):
    domain = Field('domain')
    workflow_id = Field('workflowId')
    workflow_type = Field('workflowType', kind=STRUCTURED, type=WorkflowType)
    task_list = Field('taskList', kind=STRUCTURED, type=TaskList)
    input = Field('input')
    execution_start_to_close_timeout = Field('executionStartToCloseTimeout')
    tag_list = Field('tagList', kind=LIST)
    child_policy = Field('childPolicy', type=ChildPolicy)


class Run(Model):
    run_id = Field('runId')


class WorkflowExecution(Model):
    workflow_id = Field('workflowId')
    run_id = Field('runId')


class SignalWorkflowExecutionRequest(Model):
    domain = Field('domain')
    workflow_id = Field('workflowId')
    run_id = Field('runId')
    signal_name = Field('signalName')
    input = Field('input')


class ExecutionTimeFilter(Model):
    oldest_date = Field('oldestDate', type=datetime.datetime)
    latest_date = Field('latestDate', type=datetime.datetime)


class CountClosedWorkflowExecutionsRequest(Model):
    domain = Field('domain')
    start_time_filter = Field('startTimeFilter', kind=STRUCTURED, type=ExecutionTimeFilter)
    close_time_filter = Field('closeTimeFilter', kind=STRUCTURED, type=ExecutionTimeFilter)


class WorkflowExecutionCount(Model):
    count = Field('count', type=int)
    truncated = Field('truncated', type=bool)


class RegisterWorkflowTypeRequest(Model):
    domain = Field('domain')
    name = Field('name')
    version = Field('version')
    description = Field('description')
    default_task_start_to_close_timeout = Field('defaultTaskStartToCloseTimeout')
    default_execution_start_to_close_timeout = Field('defaultExecutionStartToCloseTimeout')
    default_task_list = Field('defaultTaskList', kind=STRUCTURED, type=TaskList)
    default_task_priority = Field('defaultTaskPriority')
    default_child_policy = Field('defaultChildPolicy', type=ChildPolicy)


class ListWorkflowTypesRequest(Model):
    domain = Field('domain')
    name = Field('name')
    registration_status = Field('registrationStatus', type=RegistrationStatus)
    next_page_token = Field('nextPageToken')
    maximum_page_size = Field('maximumPageSize', type=int)
    reverse_order = Field('reverseOrder', type=bool)


class WorkflowTypeInfo(Model):
    workflow_type = Field('workflowType', kind=STRUCTURED, type=WorkflowType)
    status = Field('status', type=RegistrationStatus)
    description = Field('description')
    creation_date = Field('creationDate', type=datetime.datetime)
    deprecation_date = Field('deprecationDate', type=datetime.datetime)


class WorkflowTypeInfos(Model):
    type_infos = Field('typeInfos', kind=LIST, member=STRUCTURED, type=WorkflowTypeInfo)
    next_page_token = Field('nextPageToken')


class DeprecateWorkflowTypeRequest(Model):
    domain = Field('domain')
    workflow_type = Field('workflowType', kind=STRUCTURED, type=WorkflowType)


def _operation(name, input, output=None):
    return client.Operation(name, input, output, target='SimpleWorkflowService.' + name)


LIST_DOMAINS = _operation('ListDomains', ListDomainsRequest, DomainInfos)
REGISTER_DOMAIN = _operation('RegisterDomain', RegisterDomainRequest)
DEPRECATE_DOMAIN = _operation('DeprecateDomain', DeprecateDomainRequest)
START_WORKFLOW_EXECUTION = _operation('StartWorkflowExecution', StartWorkflowExecutionRequest, Run)
SIGNAL_WORKFLOW_EXECUTION = _operation('SignalWorkflowExecution', SignalWorkflowExecutionRequest)
COUNT_CLOSED_WORKFLOW_EXECUTIONS = _operation('CountClosedWorkflowExecutions', CountClosedWorkflowExecutionsRequest, WorkflowExecutionCount)
REGISTER_WORKFLOW_TYPE = _operation('RegisterWorkflowType', RegisterWorkflowTypeRequest)
LIST_WORKFLOW_TYPES = _operation('ListWorkflowTypes', ListWorkflowTypesRequest, WorkflowTypeInfos)
DEPRECATE_WORKFLOW_TYPE = _operation('DeprecateWorkflowType', DeprecateWorkflowTypeRequest)


class WorkflowClient(client.Client):

    service = 'swf'

    def list_domains(self, request):
        return self.invoke(LIST_DOMAINS, request)

    def list_domains_async(self, request, callback=None):
        return self.invoke_async(LIST_DOMAINS, request, callback)

    def register_domain(self, request):
        return self.invoke(REGISTER_DOMAIN, request)

    def register_domain_async(self, request, callback=None):
        return self.invoke_async(REGISTER_DOMAIN, request, callback)

    def deprecate_domain(self, request):
        return self.invoke(DEPRECATE_DOMAIN, request)

    def deprecate_domain_async(self, request, callback=None):
        return self.invoke_async(DEPRECATE_DOMAIN, request, callback)

    def start_workflow_execution(self, request):
        return self.invoke(START_WORKFLOW_EXECUTION, request)

    def start_workflow_execution_async(self, request, callback=None):
        return self.invoke_async(START_WORKFLOW_EXECUTION, request, callback)

    def signal_workflow_execution(self, request):
        return self.invoke(SIGNAL_WORKFLOW_EXECUTION, request)

    def signal_workflow_execution_async(self, request, callback=None):
        return self.invoke_async(SIGNAL_WORKFLOW_EXECUTION, request, callback)

    def count_closed_workflow_executions(self, request):
        return self.invoke(COUNT_CLOSED_WORKFLOW_EXECUTIONS, request)

    def count_closed_workflow_executions_async(self, request, callback=None):
        return self.invoke_async(COUNT_CLOSED_WORKFLOW_EXECUTIONS, request, callback)

    def register_workflow_type(self, request):
        return self.invoke(REGISTER_WORKFLOW_TYPE, request)

    def register_workflow_type_async(self, request, callback=None):
        return self.invoke_async(REGISTER_WORKFLOW_TYPE, request, callback)

    def list_workflow_types(self, request):
        return self.invoke(LIST_WORKFLOW_TYPES, request)

    def list_workflow_types_async(self, request, callback=None):
        return self.invoke_async(LIST_WORKFLOW_TYPES, request, callback)

    def deprecate_workflow_type(self, request):
        return self.invoke(DEPRECATE_WORKFLOW_TYPE, request)

    def deprecate_workflow_type_async(self, request, callback=None):
        return self.invoke_async(DEPRECATE_WORKFLOW_TYPE, request, callback)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
