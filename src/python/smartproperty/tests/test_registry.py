#-*-coding:utf-8-*-
"""
@package smartproperty.tests.test_registry
@brief tests for smartproperty.registry

@author Sebastian Thiel
@copyright [GNU Lesser General Public License](https://www.gnu.org/licenses/lgpl.html)
"""
from smartproperty.tests.base import (TestCase,
                                      Person,
                                      Employee)

from smartproperty import (SmartProperties,
                           Property,
                           PropertyRegistry,
                           NoSuchPropertyError)


class Mixin(SmartProperties):
    color = Property(default='red')
    age = Property(default=99)

# end class Mixin


class MixedEmployee(Employee, Mixin):
    pass

# end class MixedEmployee


class TestRegistry(TestCase):
    __slots__ = ()

    def test_resolution(self):
        assert PropertyRegistry.of(SmartProperties) is not None
        assert len(PropertyRegistry.of(SmartProperties)) == 0, 'the base type has no properties'

        registry = PropertyRegistry.of(Person)
        assert registry.owner() is Person
        assert registry.names() == ['name', 'age', 'language_code']
        assert 'age' in registry and 'email' not in registry
        assert registry.property('age') is Person.age
        self.assertRaises(NoSuchPropertyError, registry.property, 'email')
        self.assertRaises(AttributeError, registry.property, 'email')
        assert 'Person' in repr(registry)

        # overrides keep their position, new properties are appended
        registry = PropertyRegistry.of(Employee)
        assert registry.names() == ['name', 'age', 'language_code', 'email', 'tags']
        assert registry.property('age') is Employee.age
        assert registry.property('age') is not Person.age
        assert registry.property('name') is Person.name
        assert PropertyRegistry.of(Person).property('age') is Person.age, 'bases keep their definition'

        # the closest base wins
        registry = PropertyRegistry.of(MixedEmployee)
        assert registry.names() == ['color', 'age', 'name', 'language_code', 'email', 'tags']
        assert registry.property('age') is Employee.age
        inst = MixedEmployee(name='x')
        assert inst.age == 18
        assert inst.color == 'red'

    def test_diamond(self):
        class Top(SmartProperties):
            p = Property(default=1, accepts=int)
        # end class Top

        class Left(Top):
            p = Property(default='left', accepts=str)
        # end class Left

        class Right(Top):
            q = Property()
        # end class Right

        class Bottom(Right, Left):
            pass
        # end class Bottom

        registry = PropertyRegistry.of(Bottom)
        assert Bottom.p is Left.p
        assert registry.property('p') is Left.p, 'registry and attribute lookup agree'
        assert Bottom.properties()['p'] is Left.p
        assert registry.names() == ['p', 'q']
        inst = Bottom()
        assert inst.p == 'left'
        assert Top().p == 1

    def test_declare(self):
        registry = PropertyRegistry(Person, [Property(name='a'), Property(name='b')])
        assert registry.names() == ['a', 'b']
        replacement = registry.declare(Property(name='a', default=1))
        assert registry.names() == ['a', 'b']
        assert registry.property('a') is replacement
        assert [p.name() for p in registry] == ['a', 'b']

        copy = registry.copy()
        del copy['a']
        assert len(registry) == 2, 'copies are independent'

# end class TestRegistry
