""" Elastic MapReduce: cluster steps.
"""

import datetime

from .. import client
from ..protocol.binding import Field, Model
from ..protocol.fields import LIST, MAP, STRUCTURED
from ..protocol.variant import Enumerated, register


@register
class StepState(Enumerated):
    PENDING = 'PENDING'
    CANCEL_PENDING = 'CANCEL_PENDING'
    RUNNING = 'RUNNING'
    COMPLETED = 'COMPLETED'
    CANCELLED = 'CANCELLED'
    FAILED = 'FAILED'
    INTERRUPTED = 'INTERRUPTED'


@register
class StepStateChangeReasonCode(Enumerated):
    NONE = 'NONE'


@register
class ActionOnFailure(Enumerated):
    TERMINATE_JOB_FLOW = 'TERMINATE_JOB_FLOW'
    TERMINATE_CLUSTER = 'TERMINATE_CLUSTER'
    CANCEL_AND_WAIT = 'CANCEL_AND_WAIT'
    CONTINUE = 'CONTINUE'


class StepStateChangeReason(Model):
    code = Field('Code', type=StepStateChangeReasonCode)
    message = Field('Message')


class FailureDetails(Model):
    reason = Field('Reason')
    message = Field('Message')
    log_file = Field('LogFile')


class StepTimeline(Model):
    creation_date_time = Field('CreationDateTime', type=datetime.datetime)
    start_date_time = Field('StartDateTime', type=datetime.datetime)
    end_date_time = Field('EndDateTime', type=datetime.datetime)


class StepStatus(Model):
    state = Field('State', type=StepState)
    state_change_reason = Field('StateChangeReason', kind=STRUCTURED, type=StepStateChangeReason)
    failure_details = Field('FailureDetails', kind=STRUCTURED, type=FailureDetails)
    timeline = Field('Timeline', kind=STRUCTURED, type=StepTimeline)


class HadoopStepConfig(Model):
    jar = Field('Jar')
    properties = Field('Properties', kind=MAP)
    main_class = Field('MainClass')
    args = Field('Args', kind=LIST)


class Step(Model):
    id = Field('Id')
    name = Field('Name')
    config = Field('Config', kind=STRUCTURED, type=HadoopStepConfig)
    action_on_failure = Field('ActionOnFailure', type=ActionOnFailure)
    status = Field('Status', kind=STRUCTURED, type=StepStatus)


class DescribeStepRequest(Model):
    cluster_id = Field('ClusterId')
    step_id = Field('StepId')


class DescribeStepResult(Model):
    step = Field('Step', kind=STRUCTURED, type=Step)


class CancelStepsRequest(Model):
    cluster_id = Field('ClusterId')
    step_ids = Field('StepIds', kind=LIST)


class CancelStepsInfo(Model):
    step_id = Field('StepId')
    status = Field('Status')
    reason = Field('Reason')


class CancelStepsResult(Model):
    cancel_steps_info_list = Field('CancelStepsInfoList', kind=LIST, member=STRUCTURED, type=CancelStepsInfo)


def _operation(name, input, output=None):
    return client.Operation(name, input, output, target='ElasticMapReduce.' + name)


DESCRIBE_STEP = _operation('DescribeStep', DescribeStepRequest, DescribeStepResult)
CANCEL_STEPS = _operation('CancelSteps', CancelStepsRequest, CancelStepsResult)


class EMRClient(client.Client):

    service = 'elasticmapreduce'

    def describe_step(self, request):
        return self.invoke(DESCRIBE_STEP, request)

    def describe_step_async(self, request, callback=None):
        return self.invoke_async(DESCRIBE_STEP, request, callback)

    def cancel_steps(self, request):
        return self.invoke(CANCEL_STEPS, request)

    def cancel_steps_async(self, request, callback=None):
        return self.invoke_async(CANCEL_STEPS, request, callback)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
