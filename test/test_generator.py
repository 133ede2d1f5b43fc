#!/usr/bin/env python

from manifuncstest import *

from manifuncs.generator import Generator


class TestGenerator(ManiFuncsTestWithTempDir):
    def test_render_functions(self):
        rules = [
            {'template': "{{ prefix(hosts, 'web-') | join(',') }}", 'variables': {'hosts': ['a', 'b']}, 'expected': 'web-a,web-b'},
            {'template': "{{ hosts | prefix('web-') | join(',') }}", 'variables': {'hosts': ['a', 1]}, 'expected': 'web-a,web-1'},
            {'template': "{{ prefix(hosts, prefix='web-') | join(',') }}", 'variables': {'hosts': ['a', 'b']}, 'expected': 'web-a,web-b'},
            {'template': "{{ hosts | prefix(prefix='web-') | join(',') }}", 'variables': {'hosts': ['a', True]}, 'expected': 'web-a,web-true'},
            {'template': "{{ hosts | uniq | join(',') }}", 'variables': {'hosts': ['a', 'b', 'a']}, 'expected': 'a,b'},
            {'template': "{{ 'abbc' | uniq }}", 'variables': {}, 'expected': 'abc'},
            {'template': "{{ hosts | uniq | prefix('srv-') | join(' ') }}", 'variables': {'hosts': ['a', 'a', 'b']}, 'expected': 'srv-a srv-b'},
            {'template': "{% for h in prefix(hosts) %}{{ h }};{% endfor %}", 'variables': {'hosts': ['x', 'y']}, 'expected': 'x;y;'},
            {'template': "{{ prefix([], 'x-') | length }}\n", 'variables': {}, 'expected': '0\n'},
        ]
        for r in rules:
            g = Generator('test', r['template'], variables=r['variables'])
            g.generate()
            self.assertEqual(g.get_state(), 'COMPLIANT', g.log)
            self.assert_rule(r['template'], g.output, r['expected'])


    def test_function_error(self):
        g = Generator('bad-call', "{{ prefix('not-a-list', 'x-') }}")
        g.generate()
        self.assertEqual(g.get_state(), 'ERROR')
        self.assertIsNone(g.output)
        self.assertIn('prefix(): Requires an array type to work with', g.log)

        g = Generator('bad-keyword', "{{ prefix(hosts, suffix='x-') }}", variables={'hosts': ['a']})
        g.generate()
        self.assertEqual(g.get_state(), 'ERROR')
        self.assertIn('prefix(): Unknown argument suffix', g.log)

        g = Generator('bad-arity', "{{ uniq() }}")
        g.generate()
        self.assertEqual(g.get_state(), 'ERROR')
        self.assertIn('uniq(): Wrong number of arguments given (0 for 1)', g.log)


    def test_syntax_error(self):
        g = Generator('bad-syntax', "{{ prefix( }}")
        g.generate()
        self.assertEqual(g.get_state(), 'ERROR')
        self.assertIsNone(g.output)
        self.assertIsNone(g.template)


    def test_from_file(self):
        path = os.path.join(self.tmp_dir, 'hosts.tpl')
        with open(path, 'w') as f:
            f.write("{% for h in hosts | uniq %}\nserver {{ h }}\n{% endfor %}\n")
        g = Generator.from_file('hosts', path, variables={'hosts': ['db', 'db', 'web']})
        self.assertEqual(g.get_state(), 'UNKNOWN')
        g.generate()
        self.assertEqual(g.get_state(), 'COMPLIANT', g.log)
        self.assertEqual(g.output, 'server db\nserver web\n')
        dump = g.get_json_dump()
        self.assertEqual(dump['name'], 'hosts')
        self.assertEqual(dump['state'], 'COMPLIANT')


    def test_missing_file(self):
        g = Generator.from_file('missing', os.path.join(self.tmp_dir, 'missing.tpl'))
        self.assertEqual(g.get_state(), 'ERROR')
        self.assertIn('Cannot open template file', g.log)
        g.generate()
        self.assertEqual(g.get_state(), 'ERROR')
        self.assertIsNone(g.output)


if __name__ == '__main__':
    unittest.main()
