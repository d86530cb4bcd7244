""" CloudWatch Logs: subscription filters.
"""

from .. import client
from ..protocol.binding import Field, Model
from ..protocol.fields import LIST, STRUCTURED
from ..protocol.variant import Enumerated, register


@register
class Distribution(Enumerated):
    """ How log events are distributed to the destination of a subscription
        filter.
    """

    RANDOM = 'Random'
    BY_LOG_STREAM = 'ByLogStream'


class PutSubscriptionFilterRequest(Model):
    log_group_name = Field('logGroupName')
    filter_name = Field('filterName')
    filter_pattern = Field('filterPattern')
    destination_arn = Field('destinationArn')
    role_arn = Field('roleArn')
    distribution = Field('distribution', type=Distribution)


class DescribeSubscriptionFiltersRequest(Model):
    log_group_name = Field('logGroupName')
    filter_name_prefix = Field('filterNamePrefix')
    next_token = Field('nextToken')
    limit = Field('limit', type=int)


class SubscriptionFilter(Model):
    filter_name = Field('filterName')
    log_group_name = Field('logGroupName')
    filter_pattern = Field('filterPattern')
    destination_arn = Field('destinationArn')
    role_arn = Field('roleArn')
    distribution = Field('distribution', type=Distribution)
    creation_time = Field('creationTime', type=int)


class DescribeSubscriptionFiltersResult(Model):
    subscription_filters = Field('subscriptionFilters', kind=LIST, member=STRUCTURED, type=SubscriptionFilter)
    next_token = Field('nextToken')


def _operation(name, input, output=None):
    return client.Operation(name, input, output, target='Logs_20140328.' + name)


PUT_SUBSCRIPTION_FILTER = _operation('PutSubscriptionFilter', PutSubscriptionFilterRequest)
DESCRIBE_SUBSCRIPTION_FILTERS = _operation('DescribeSubscriptionFilters', DescribeSubscriptionFiltersRequest, DescribeSubscriptionFiltersResult)


class LogsClient(client.Client):

    service = 'logs'

    def put_subscription_filter(self, request):
        return self.invoke(PUT_SUBSCRIPTION_FILTER, request)

    def put_subscription_filter_async(self, request, callback=None):
        return self.invoke_async(PUT_SUBSCRIPTION_FILTER, request, callback)

    def describe_subscription_filters(self, request):
        return self.invoke(DESCRIBE_SUBSCRIPTION_FILTERS, request)

    def describe_subscription_filters_async(self, request, callback=None):
        return self.invoke_async(DESCRIBE_SUBSCRIPTION_FILTERS, request, callback)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
