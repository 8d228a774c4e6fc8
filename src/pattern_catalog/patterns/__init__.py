"""Pattern examples grouped by GoF family.

CATALOGUE lists every example as ``(name, category, summary, demo)``; the
pattern registry is populated from it.
"""

from pattern_catalog.patterns.behavioral import (
    chain_of_responsibility,
    command,
    listener,
    mediator,
    memento,
    state,
    strategy,
    visitor,
)
from pattern_catalog.patterns.creational import (
    abstract_factory,
    builder,
    factory_method,
    prototype,
    singleton,
)
from pattern_catalog.patterns.structural import (
    adapter,
    composite,
    decorator,
    facade,
    flyweight,
    proxy,
)

CATALOGUE = [
    # Creational
    ("abstract-factory", "creational", "Pick a plant factory by the plant type it produces", abstract_factory.demo),
    ("builder", "creational", "Assemble a third-party dialog from optional parts", builder.demo),
    ("factory-method", "creational", "Map a country to its currency", factory_method.demo),
    ("prototype", "creational", "Clone an immutable personal record", prototype.demo),
    ("singleton", "creational", "Share one printer driver and one lazily created dummy", singleton.demo),
    # Structural
    ("adapter", "structural", "Read and write a Celsius thermometer in Fahrenheit", adapter.demo),
    ("composite", "structural", "Price a computer as the sum of its parts", composite.demo),
    ("decorator", "structural", "Add milk and double shots to a coffee machine", decorator.demo),
    ("facade", "structural", "Hide a preference store behind a user repository", facade.demo),
    ("flyweight", "structural", "Share one race car object between clients", flyweight.demo),
    ("proxy", "structural", "Guard file reads behind a password", proxy.demo),
    # Behavioral
    ("chain-of-responsibility", "behavioral", "Build message headers link by link", chain_of_responsibility.demo),
    ("command", "behavioral", "Queue order commands and run them later", command.demo),
    ("listener", "behavioral", "Notify a listener of every text change", listener.demo),
    ("mediator", "behavioral", "Route chat messages through a mediator", mediator.demo),
    ("memento", "behavioral", "Save and restore an originator's state", memento.demo),
    ("state", "behavioral", "Switch between authorized and unauthorized states", state.demo),
    ("strategy", "behavioral", "Print strings through interchangeable formatters", strategy.demo),
    ("visitor", "behavioral", "Compute monthly and yearly contract costs", visitor.demo),
]

__all__ = ["CATALOGUE"]
