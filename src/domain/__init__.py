"""Domain layer - Pure business logic.

This layer contains the resource aggregate, value objects, protocols
(ports), validators and domain events. The domain layer has NO dependencies
on any web or persistence framework.

Structure:
- entities/: Resource aggregate and its characteristics
- value_objects/: Location, paging, snapshots
- validators/: Field rules and aggregate validation
- protocols/: Repository, event publisher and logger ports
- events/: Resource lifecycle events
"""
